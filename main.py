import argparse
import config
import logging
import queue
import threading
import time
from common import UIMessageType
from common.broadcaster import StatusBroadcaster
from display import Display, LifeView
from providers.patterns import PATTERNS, centered_seed, pattern_by_name, random_seed
from server import Server

REFRESH_RATE = 0.1  # seconds

logger = logging.getLogger("life-board")


def setup_logging(level: str = "INFO"):
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt="%Y-%m-%dT%H:%M:%S%z")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life on a checkbox grid")
    parser.add_argument(
        '--size', type=int, default=config.GRID_SIZE,
        help='Side length of the square grid')
    parser.add_argument(
        '--interval', type=float, default=config.TICK_INTERVAL,
        help='Seconds between autoplay ticks')
    parser.add_argument(
        '--pattern', type=str, choices=sorted(PATTERNS),
        default=config.DEFAULT_PATTERN,
        help='Seed the grid with a pattern in its center')
    parser.add_argument(
        '--random', action='store_true',
        help='Seed the grid with random cells')
    parser.add_argument(
        '--density', type=float, default=config.RANDOM_DENSITY,
        help='Share of live cells for --random')
    parser.add_argument(
        '--port', type=int, default=config.SERVER_PORT,
        help='Web server port')
    parser.add_argument(
        '--log-level', type=str, default=config.LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level')
    return parser.parse_args(argv)


def handle_ui_message(view: LifeView, message: dict, density: float):
    if message["type"] == UIMessageType.NEXT:
        view.next()
    elif message["type"] == UIMessageType.PLAY:
        view.play()
    elif message["type"] == UIMessageType.CLEAR:
        view.clear()
        logger.info("Grid cleared")
    elif message["type"] == UIMessageType.SET_CELL:
        view.set_cell(message["x"], message["y"], message["state"])
    elif message["type"] == UIMessageType.TOGGLE_CELL:
        view.toggle(message["x"], message["y"])
    elif message["type"] == UIMessageType.SET_AUTOPLAY:
        view.set_autoplay(message["enabled"])
    elif message["type"] == UIMessageType.LOAD_PATTERN:
        name = message["name"]
        view.load(centered_seed(view.size, view.size, pattern_by_name(name)))
        logger.info(f"Loaded pattern: {name}")
    elif message["type"] == UIMessageType.LOAD_RANDOM:
        view.load(random_seed(view.size, view.size, density))
        logger.info(f"Loaded random seed with density {density}")
    else:
        logger.warning(f"Unknown UI message: {message}")


def ui_task(ui_queue: queue.Queue, view: LifeView, density: float):
    while True:
        try:
            message = ui_queue.get(timeout=REFRESH_RATE)
        except queue.Empty:
            continue
        try:
            handle_ui_message(view, message, density)
        except (KeyError, IndexError, ValueError):
            logger.exception(f"Dropping invalid UI message: {message}")


def render_task(render_queue: queue.Queue, display: Display):
    while True:
        try:
            message = render_queue.get(timeout=REFRESH_RATE)
            display.render(message)
        except queue.Empty:
            continue


def initial_seed(args):
    if args.random:
        return random_seed(args.size, args.size, args.density)
    if args.pattern:
        return centered_seed(args.size, args.size, pattern_by_name(args.pattern))
    return None


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger.info(f"Grid {args.size}x{args.size}, tick every {args.interval}s")

    ui_queue = queue.Queue(maxsize=16)
    render_queue = queue.Queue(maxsize=32)
    state_broadcaster = StatusBroadcaster()

    view = LifeView(args.size, args.interval, render_queue, state_broadcaster)
    seed = initial_seed(args)
    if seed is not None:
        view.load(seed)
    display = Display(args.size, args.size, config.CELL_SIZE)
    server = Server(ui_queue, state_broadcaster, display,
                    host=config.SERVER_HOST, port=args.port)

    threads = [
        threading.Thread(target=ui_task, args=(ui_queue, view, args.density),
                         daemon=True),
        threading.Thread(target=render_task, args=(render_queue, display),
                         daemon=True),
        threading.Thread(target=server.web_server_task, daemon=True),
    ]
    for thread in threads:
        thread.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down")
        view.stop()


if __name__ == "__main__":
    main()
