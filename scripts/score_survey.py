"""
Score every pair of respondents in a survey file.

Loads the configuration and a survey, scores all respondent pairs,
prints the ranked pairs and an evaluation summary.

Usage:
    python scripts/score_survey.py --survey configs/example_survey.yaml
    python scripts/score_survey.py --survey survey.yaml --report report.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from affinity.configs import load_config, validate_config, get_config_value, importance_from_config
from affinity.data_loading import load_survey
from affinity.evaluation import create_evaluation_report
from affinity.pair_generation import PairGenerator, score_survey_pairs

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Score all respondent pairs of a survey")
    parser.add_argument(
        "--config",
        type=str,
        default=str(project_root / "configs" / "config.yaml"),
        help="Path to configuration YAML file"
    )
    parser.add_argument(
        "--survey",
        type=str,
        default=str(project_root / "configs" / "example_survey.yaml"),
        help="Path to survey YAML file"
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Optional path to write the evaluation report as JSON"
    )
    args = parser.parse_args()

    config = load_config(args.config)
    issues = validate_config(config)
    if issues:
        for issue in issues:
            logger.error(f"Config issue: {issue}")
        sys.exit(1)

    level = get_config_value(config, "global.log_level", "INFO")
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    survey = load_survey(args.survey, importance_from_config(config))
    pairs = score_survey_pairs(survey, PairGenerator.from_config(config))
    if pairs.empty:
        logger.error("No pairs to score")
        sys.exit(1)

    print(pairs.to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    report = create_evaluation_report(Path(args.survey).stem, survey, pairs, config)
    print()
    print(report.summary())

    if args.report:
        report.save(args.report)


if __name__ == "__main__":
    main()
