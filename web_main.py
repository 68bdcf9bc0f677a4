"""Web query entry point — starts the Flask app."""

import logging
import os
import sys

from log_retrieval.config import load_config
from log_retrieval.web import create_app


def main() -> None:
    config = load_config(os.environ.get("CONFIG_PATH", "config.yml"))
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [log-retrieval] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger(__name__).info(
        "Serving logs from %s on %s:%d", config.log_dir, config.host, config.port
    )
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
