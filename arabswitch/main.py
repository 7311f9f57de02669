"""Entry point for ArabSwitch.

Usage:
    python -m arabswitch.main                   # full mode (daemon + tray)
    python -m arabswitch.main --daemon          # daemon only (no GUI)
    python -m arabswitch.main --convert salam   # one-shot conversion
    echo "salam" | python -m arabswitch.main --convert
    python -m arabswitch.main --table           # dump the layout table
"""
import sys
import signal
import logging
import argparse


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def run_full(debug: bool = False) -> int:
    """Run daemon + tray in a single process (default mode)."""
    from PyQt5.QtWidgets import QApplication
    from arabswitch.bridge import HotkeyError
    from arabswitch.config import Config
    from arabswitch.daemon import Daemon
    from arabswitch.tray import TrayIcon
    from arabswitch.x11_bridge import X11Bridge

    app = QApplication(sys.argv)
    app.setApplicationName("ArabSwitch")
    app.setQuitOnLastWindowClosed(False)

    config = Config()
    setup_logging(debug or config.debug_logging)
    logger = logging.getLogger(__name__)

    bridge = X11Bridge()
    daemon = Daemon(config, bridge)
    tray = TrayIcon(daemon)
    daemon.on_error = tray.show_error

    try:
        daemon.start()
    except HotkeyError as e:
        logger.error("%s", e)
        bridge.close()
        return 1

    tray.show()
    try:
        return app.exec_()
    finally:
        daemon.stop()
        bridge.close()


def run_daemon(debug: bool = False) -> int:
    """Run daemon only (headless)."""
    import time
    from arabswitch.bridge import HotkeyError
    from arabswitch.config import Config
    from arabswitch.daemon import Daemon
    from arabswitch.x11_bridge import X11Bridge

    config = Config()
    setup_logging(debug or config.debug_logging)

    logger = logging.getLogger(__name__)
    logger.info("Starting ArabSwitch daemon (headless mode)")

    bridge = X11Bridge()
    daemon = Daemon(config, bridge)
    try:
        daemon.start()
    except HotkeyError as e:
        logger.error("%s", e)
        bridge.close()
        return 1

    try:
        while daemon.running:
            time.sleep(0.2)
    except KeyboardInterrupt:
        pass
    finally:
        daemon.stop()
        bridge.close()
    return 0


def run_convert(words, out=None) -> int:
    """Convert the given words (or stdin) and print the result."""
    from arabswitch.converter import convert

    out = out or sys.stdout
    if words:
        text = ' '.join(words)
    else:
        text = sys.stdin.read()
        if text.endswith('\n'):
            text = text[:-1]

    result = convert(text)
    out.write(result.text + '\n')
    return 0


def print_table(out=None) -> int:
    """Print the forward table and the entries lost in the reverse table."""
    from arabswitch.layout_map import default_table

    out = out or sys.stdout
    table = default_table()
    for source, target in table.forward.items():
        back = table.reverse.get(target)
        marker = '' if back == source else f'  (reverse → {back!r})'
        out.write(f"{source!r:>6} → {target!r}{marker}\n")

    out.write(f"\n{len(table.collisions)} reverse collisions:\n")
    for c in table.collisions:
        out.write(f"  {c.target!r}: kept {c.kept!r}, dropped {c.dropped!r}\n")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="arabswitch",
        description="English ↔ Arabic keyboard layout converter",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--daemon", action="store_true",
                       help="Run daemon only (headless)")
    group.add_argument("--convert", nargs='*', metavar="TEXT",
                       help="Convert TEXT (or stdin) and exit")
    group.add_argument("--table", action="store_true",
                       help="Print the layout table and exit")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.convert is not None:
        return run_convert(args.convert)
    if args.table:
        return print_table()
    if args.daemon:
        return run_daemon(args.debug)
    # Let Ctrl+C kill the Qt event loop
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    return run_full(args.debug)


if __name__ == "__main__":
    sys.exit(main())
