import argparse
import json
import logging
import sys

from core.config_loader import load_config
from core.scorer import ScoringService
from database.database import Database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_answers(answers_file_path: str) -> dict | None:
    """Load a raw answer set from a JSON file."""
    logger.info(f"Loading answers from {answers_file_path}")
    try:
        with open(answers_file_path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Answers file not found: {answers_file_path}")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in answers file: {e}")
        return None


def run_score(args) -> int:
    config = load_config(args.config)
    answers = load_answers(args.answers)
    if answers is None:
        return 1

    service = ScoringService(config.scoring)
    result = service.evaluate(answers)
    output = {'result': result.to_dict()}
    if args.summary:
        output['summary'] = service.summarize(result).to_dict()

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def run_serve(args) -> int:
    import uvicorn
    from web.backend.app import create_app

    config = load_config(args.config)
    logger.info(f"Starting Evaluation API on {config.web.host}:{config.web.port}")
    uvicorn.run(create_app(config), host=config.web.host, port=config.web.port, log_level="info")
    return 0


def run_init_db(args) -> int:
    config = load_config(args.config)
    database = Database(config.database)
    database.create_all()
    database.dispose()
    logger.info(f"Initialized database at {config.database.url}")
    return 0


def main(argv=None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML configuration file (default: config.yaml)')

    parser = argparse.ArgumentParser(description="Candidate evaluation engine")
    subparsers = parser.add_subparsers(dest='command', required=True)

    score_parser = subparsers.add_parser('score', parents=[common], help='Score an answer set from a JSON file')
    score_parser.add_argument('answers', type=str, help='Path to the answers JSON file')
    score_parser.add_argument('--summary', action='store_true',
                              help='Include the executive summary in the output')
    score_parser.set_defaults(handler=run_score)

    serve_parser = subparsers.add_parser('serve', parents=[common], help='Run the HTTP API')
    serve_parser.set_defaults(handler=run_serve)

    init_parser = subparsers.add_parser('init-db', parents=[common], help='Create database tables')
    init_parser.set_defaults(handler=run_init_db)

    args = parser.parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
