from pathlib import Path

from onemax.core.config import get_config
from onemax.core.logging import setup_logging
from onemax.genetic import Simulation
from onemax.reporting import render_report


def main():
    config = get_config()
    setup_logging(
        level=config.logging.level,
        log_file=Path(config.logging.log_file),
        enable_console=config.logging.enable_console,
        enable_file=config.logging.enable_file
    )

    result = Simulation(config.simulation).run()
    print(render_report(result))


if __name__ == "__main__":
    main()
