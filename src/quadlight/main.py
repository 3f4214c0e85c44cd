"""
QuadLight controller - command line entry point

Subcommands:
    run      start the streaming worker and (optionally) the HTTP API
    preview  print synthesized frames for a configuration
    modes    list lighting modes
    probe    check whether the device answers
    color    set one solid color and exit
"""

import argparse
import signal
import sys
import threading
from dataclasses import replace
from typing import List, Optional

from quadlight import __version__
from quadlight.engine.frame_cursor import FrameCursor
from quadlight.engine.frame_synthesis import synthesize
from quadlight.hardware.transport_factory import create_transport
from quadlight.managers.config_manager import ConfigManager, DeviceConfig, parse_log_level
from quadlight.models.color import Color
from quadlight.models.domain.lighting import LightingConfig
from quadlight.models.enums import LightingMode, LogCategory
from quadlight.models.lighting_params import BRIGHTNESS, DELAY, SPEED
from quadlight.services.lighting_service import LightingService
from quadlight.services.service_container import ServiceContainer
from quadlight.services.settings_store import SettingsStore
from quadlight.services.streaming_worker import StreamingWorker
from quadlight.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def _hex_color(value: str) -> Color:
    color = Color.parse_hex(value)
    if color is None:
        raise argparse.ArgumentTypeError(f"'{value}' is not a 6-digit hex color")
    return color


def _mode(value: str) -> LightingMode:
    try:
        return LightingMode.from_name(value)
    except ValueError:
        valid = ", ".join(m.value for m in LightingMode)
        raise argparse.ArgumentTypeError(f"unknown mode '{value}' (choose from {valid})")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=None, help="Path to config.yaml")
    common.add_argument("--log-level", default=None, help="DEBUG, INFO, WARN or ERROR")
    common.add_argument("--virtual", action="store_true", help="Use the in-memory transport")

    parser = argparse.ArgumentParser(prog="quadlight", description="Two-zone RGB lighting controller")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", parents=[common], help="Stream frames to the device")
    run.add_argument("--no-api", action="store_true", help="Do not start the HTTP API")

    preview = sub.add_parser("preview", help="Print synthesized frames")
    preview.add_argument("--mode", type=_mode, default=LightingMode.SOLID)
    preview.add_argument("--colors", type=_hex_color, nargs="+", default=None, metavar="HEX")
    preview.add_argument("--speed", type=int, default=SPEED.default)
    preview.add_argument("--delay", type=int, default=DELAY.default)
    preview.add_argument("--brightness", type=int, default=BRIGHTNESS.default)
    preview.add_argument("--limit", type=int, default=None, help="Print at most N frames")

    sub.add_parser("modes", help="List lighting modes")
    sub.add_parser("probe", parents=[common], help="Check whether the device answers")

    color = sub.add_parser("color", parents=[common], help="Set a solid color once and exit")
    color.add_argument("hex", type=_hex_color, metavar="HEX")

    return parser


def _load_config(args: argparse.Namespace) -> ConfigManager:
    config = ConfigManager(args.config)
    config.load()

    level = config.logging.level
    if args.log_level:
        try:
            level = parse_log_level(args.log_level)
        except ValueError as ex:
            log.warn(str(ex))
    configure_logger(level, config.logging.colors)
    return config


def _device_config(config: ConfigManager, args: argparse.Namespace) -> DeviceConfig:
    device = config.device
    if args.virtual and not device.virtual:
        device = replace(device, virtual=True)
    return device


# ===== Subcommands =====

def cmd_modes(args: argparse.Namespace) -> int:
    for mode in LightingMode:
        flags = []
        if mode.uses_speed:
            flags.append("speed")
        if mode.uses_delay:
            flags.append("delay")
        print(f"{mode.value:<10} {mode.description:<32} colors<={mode.max_colors:<3} {' '.join(flags)}")
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    config = LightingConfig(
        mode=args.mode,
        colors=tuple(args.colors) if args.colors else LightingConfig().colors,
        speed=args.speed,
        delay=args.delay,
        brightness=args.brightness,
    ).validated()

    frames = synthesize(config)
    shown = frames if args.limit is None else frames[:max(0, args.limit)]
    for frame in shown:
        upper, lower = frame.to_hex_pair()
        print(f"{upper} {lower}")
    print(f"total: {len(frames)}")
    return 0


def cmd_probe(args: argparse.Namespace) -> int:
    config = _load_config(args)
    transport = create_transport(_device_config(config, args))

    handle = transport.open()
    if handle is None:
        print("device not found")
        return 1
    try:
        ok = transport.probe(handle)
    finally:
        transport.close(handle)

    print("device answered" if ok else "device did not answer")
    return 0 if ok else 1


def cmd_color(args: argparse.Namespace) -> int:
    config = _load_config(args)
    transport = create_transport(_device_config(config, args))

    handle = transport.open()
    if handle is None:
        print("device not found")
        return 1
    try:
        ok = transport.set_color(handle, args.hex)
    finally:
        transport.close(handle)

    if not ok:
        print("write failed")
        return 1
    print(f"set {args.hex}")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    config = _load_config(args)

    store = SettingsStore(config.state.resolved_path, config.state.save_on_change)
    cursor = FrameCursor()
    lighting = LightingService(cursor, store)
    worker = StreamingWorker(cursor, create_transport(_device_config(config, args)), config.stream)

    services = ServiceContainer(
        lighting_service=lighting,
        streaming_worker=worker,
        cursor=cursor,
        config_manager=config,
    )

    worker.start()
    try:
        if config.api.enabled and not args.no_api:
            _serve_api(services)
        else:
            _wait_for_signal()
    finally:
        worker.stop()
        log.info("Shutdown complete")
    return 0


def _serve_api(services: ServiceContainer) -> None:
    import uvicorn

    from quadlight.api.dependencies import set_service_container
    from quadlight.api.main import create_app

    api = services.config_manager.api
    set_service_container(services)
    log.info("Starting API server", host=api.host, port=api.port)
    try:
        # uvicorn owns SIGINT/SIGTERM here and returns once they arrive
        uvicorn.run(create_app(), host=api.host, port=api.port, log_level="warning")
    finally:
        set_service_container(None)


def _wait_for_signal() -> None:
    stop = threading.Event()

    def handler(signum, frame):
        log.info(f"Received signal {signum}, shutting down")
        stop.set()

    signal.signal(signal.SIGINT, handler)
    signal.signal(signal.SIGTERM, handler)
    log.info("Running without API, press Ctrl+C to stop")
    # Timed waits keep the main thread responsive to signals on every platform
    while not stop.wait(0.5):
        pass


COMMANDS = {
    "run": cmd_run,
    "preview": cmd_preview,
    "modes": cmd_modes,
    "probe": cmd_probe,
    "color": cmd_color,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
