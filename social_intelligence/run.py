"""
Batch runner for the guest social intelligence engine.

This is the single entrypoint for analyzing a guest list from files.

Usage:
    python -m social_intelligence.run --guests guests.json --event event.json

The runner performs the following steps:
1. Load and validate configuration (packaged defaults unless --config)
2. Load guest records (JSON or CSV) and the optional event snapshot
3. Score interactions, compatibility, pairings and networking sessions
4. Predict emotional states and analyze engagement
5. Write a JSON report (stdout unless --output)
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, List, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_analysis(
    guests_path: str,
    event_path: Optional[str] = None,
    config_path: Optional[str] = None,
    output_path: Optional[str] = None,
    top_k: int = 5,
    activity_hint: str = "general",
    log_level: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run every analysis over a guest file.

    Args:
        guests_path: Path to guest records (.json or .csv)
        event_path: Optional path to an event snapshot JSON file
        config_path: Optional configuration YAML (packaged defaults if omitted)
        output_path: If provided, write the report here as JSON
        top_k: Number of top pairs listed in the compatibility report
        activity_hint: Activity type carried on each pairing
        log_level: Overrides global.log_level from the configuration

    Returns:
        Dictionary with the report and run metadata
    """
    from .configs import resolve_config
    from .data_loading import load_guest_records, load_event_snapshot
    from .engine import EngineConfig, SocialIntelligenceEngine

    # =========================================================================
    # 1. Load and validate configuration
    # =========================================================================
    logger.info("=" * 60)
    logger.info("STEP 1: Loading configuration")
    logger.info("=" * 60)

    config = resolve_config(config_path)
    engine_config = EngineConfig.from_config(config)
    setup_logging(log_level or engine_config.log_level)

    # =========================================================================
    # 2. Load records
    # =========================================================================
    logger.info("=" * 60)
    logger.info("STEP 2: Loading records")
    logger.info("=" * 60)

    guests = load_guest_records(guests_path)
    snapshot = load_event_snapshot(event_path) if event_path else None

    # =========================================================================
    # 3. Analyze
    # =========================================================================
    logger.info("=" * 60)
    logger.info("STEP 3: Analyzing guests")
    logger.info("=" * 60)

    engine = SocialIntelligenceEngine(engine_config)
    report = engine.analyze(guests, snapshot=snapshot, activity_hint=activity_hint, top_k=top_k)
    report["generated_at"] = datetime.now(timezone.utc).isoformat()
    report["config_used"] = engine_config.to_dict()

    # =========================================================================
    # 4. Write report
    # =========================================================================
    if output_path:
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            json.dump(report, f, indent=2)
        logger.info(f"Saved report to {output}")

    stats = report["compatibility_report"]["distribution_stats"]
    logger.info(f"Analyzed {report['guest_count']} guests: "
                f"{len(report['pairings'])} pairings, "
                f"{len(report['networking_opportunities'])} networking opportunities, "
                f"mean compatibility {stats['mean']:.3f}")

    return {
        "success": True,
        "report": report,
        "output_path": output_path,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the batch runner."""
    parser = argparse.ArgumentParser(
        description="Analyze a guest list with the social intelligence engine"
    )
    parser.add_argument(
        "--guests",
        type=str,
        required=True,
        help="Path to guest records (.json or .csv)"
    )
    parser.add_argument(
        "--event",
        type=str,
        default=None,
        help="Path to an event snapshot JSON file"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (packaged defaults if omitted)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the JSON report here instead of stdout"
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=5,
        help="Number of top pairs listed in the compatibility report"
    )
    parser.add_argument(
        "--activity-hint",
        type=str,
        default="general",
        help="Activity type carried on each suggested pairing"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        result = run_analysis(
            args.guests,
            event_path=args.event,
            config_path=args.config,
            output_path=args.output,
            top_k=args.top_k,
            activity_hint=args.activity_hint,
            log_level=args.log_level,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    if not args.output:
        json.dump(result["report"], sys.stdout, indent=2)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
