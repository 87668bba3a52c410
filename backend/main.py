import argparse
import json
import logging
import random
import time

from config import GameConfig
from control import GameController, GameLoop
from domain.game import SnakeGame
from inputs import ScriptedInput, RandomInput
from renderers import ConsoleRenderer

def build_loop(config: GameConfig, input_source=None, renderer=None, rng=None, sleep=time.sleep) -> GameLoop:
    """
    Wire a controller, renderer and input source around fresh games built
    from `config`.
    """
    def new_game() -> SnakeGame:
        return SnakeGame(width=config.width, height=config.height, speed=config.speed, rng=rng)

    controller = GameController(new_game)
    return GameLoop(controller, renderer=renderer, input_source=input_source, sleep=sleep)

# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal with scripted or random input."
    )
    parser.add_argument("--width", type=int, required=False, default=None,
                        help="Width of the board (default: SNAKE_WIDTH or 10)")
    parser.add_argument("--height", type=int, required=False, default=None,
                        help="Height of the board (default: SNAKE_HEIGHT or 10)")
    parser.add_argument("--speed", type=int, required=False, default=None,
                        help="Initial tick interval in milliseconds (default: SNAKE_SPEED or 650)")
    parser.add_argument("--moves", type=str, required=False, default=None,
                        help="Comma separated commands, one per tick (e.g. 'UP,UP,-,LEFT,pause,play')")
    parser.add_argument("--autoplay", action="store_true",
                        help="Steer with random safe moves instead of a script")
    parser.add_argument("--restarts", type=int, required=False, default=0,
                        help="Number of extra games to play after the first one ends")
    parser.add_argument("--max_ticks", type=int, required=False, default=None,
                        help="Give up on a game after this many ticks")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for reproducible boards")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    config = GameConfig.from_env()
    if args.width is not None:
        config.width = args.width
    if args.height is not None:
        config.height = args.height
    if args.speed is not None:
        config.speed = args.speed

    if args.restarts < 0:
        raise ValueError("--restarts cannot be negative")

    rng = random.Random(args.seed)

    if args.moves:
        input_source = ScriptedInput.parse(args.moves)
    elif args.autoplay:
        input_source = RandomInput(rng=rng)
    else:
        input_source = None

    loop = build_loop(config, input_source=input_source, renderer=ConsoleRenderer(), rng=rng)
    results = loop.run(games=args.restarts + 1, max_ticks=args.max_ticks)

    summary = [
        {
            "outcome": result.outcome,
            "death_reason": result.death_reason,
            "score": result.state.score,
            "ticks": result.state.tick_number,
        }
        for result in results
    ]
    print("\nSummary:")
    print(json.dumps(summary, indent=2))
    return summary

if __name__ == "__main__":
    main()
