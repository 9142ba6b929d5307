import argparse

import uvicorn

from utils.logger import get_logger, log_extra

log = get_logger("runner")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trade-log dashboard API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3001)
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes (dev only)")
    args = parser.parse_args(argv)

    log.info("starting api", **log_extra(host=args.host, port=args.port))
    uvicorn.run("api.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
