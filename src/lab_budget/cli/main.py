#!/usr/bin/env python3
"""
lab-budget CLI - Command-line interface for lab cost estimation.

Usage:
    lab-budget estimate [--config FILE] [OPTIONS]
    lab-budget presets [--format FORMAT]
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from lab_budget.application import BudgetSession, export, load_configuration
from lab_budget.core.cost import OPTIMIZATION_TIP, CostModel
from lab_budget.domain import (
    DEPLOYMENT_DESCRIPTIONS,
    DEPLOYMENT_PRESETS,
    DEPLOYMENT_TYPES,
    CalculationMode,
    Configuration,
    LabBudgetError,
    deployment_label,
)

# CLI flag -> Configuration field
FIELD_FLAGS = {
    "budget": "budget",
    "runtime": "runtime_per_day",
    "instances": "instances_per_person",
    "storage": "storage_per_instance",
    "users": "number_of_users",
    "exchange_rate": "exchange_rate",
    "days": "desired_days",
    "maintenance": "maintenance_enabled",
    "mode": "mode",
}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="lab-budget",
        description="Budget calculator for cloud-hosted training labs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose (debug) logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Estimate command
    estimate_parser = subparsers.add_parser(
        "estimate",
        help="Estimate lab cost",
        description="Compute daily cost and required budget or affordable days",
    )
    estimate_parser.add_argument(
        "--config",
        "-c",
        help="Configuration file (JSON/YAML); flags override its values",
    )
    estimate_parser.add_argument(
        "--mode",
        choices=[m.value for m in CalculationMode],
        help="What to compute (default: days-to-budget)",
    )
    estimate_parser.add_argument(
        "--budget",
        type=float,
        help="Spendable budget in INR (budget-to-days mode, default: 3000)",
    )
    estimate_parser.add_argument(
        "--days",
        type=float,
        help="Number of days to run the lab (days-to-budget mode, default: 10)",
    )
    estimate_parser.add_argument(
        "--runtime",
        type=float,
        help="Hours the lab runs daily (default: 5)",
    )
    estimate_parser.add_argument(
        "--deployment",
        choices=DEPLOYMENT_TYPES,
        help="Deployment type; seeds --instances from its preset",
    )
    estimate_parser.add_argument(
        "--instances",
        type=float,
        help="EC2 instances per user (default: preset for deployment type)",
    )
    estimate_parser.add_argument(
        "--storage",
        type=float,
        help="gp3 volume per instance in GB (default: 30)",
    )
    estimate_parser.add_argument(
        "--users",
        type=float,
        help="Total number of users/trainees (default: 1)",
    )
    estimate_parser.add_argument(
        "--exchange-rate",
        type=float,
        help="USD to INR exchange rate (default: 84)",
    )
    estimate_parser.add_argument(
        "--maintenance",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add 25%% for maintenance and support services",
    )
    estimate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject inputs that would give infinite or undefined results",
    )
    estimate_parser.add_argument(
        "--output",
        "-o",
        help="Output file (supports .json, .yaml, .md)",
    )
    estimate_parser.add_argument(
        "--format",
        choices=["text", "json", "yaml", "markdown"],
        default="text",
        help="Output format (default: text)",
    )

    # Presets command
    presets_parser = subparsers.add_parser(
        "presets",
        help="List deployment types",
        description="List deployment types and their default instance counts",
    )
    presets_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )

    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    """
    Combine the configuration file (if any) with command-line overrides.

    Args:
        args: Parsed estimate arguments

    Returns:
        Configuration
    """
    config = load_configuration(args.config) if args.config else Configuration()

    if args.deployment:
        config = config.with_deployment_type(args.deployment)

    overrides: dict[str, Any] = {}
    for flag, field_name in FIELD_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            overrides[field_name] = value

    if overrides:
        data = config.to_dict()
        data.update(overrides)
        config = Configuration.from_dict(data)

    return config


def print_text(session: BudgetSession) -> None:
    """Print a human-readable estimate."""
    config = session.configuration
    result = session.result
    breakdown = session.breakdown

    print(f"\nDeployment: {deployment_label(config.deployment_type)} "
          f"({config.instances_per_person} instances/person × {config.number_of_users} users "
          f"= {breakdown.total_instances:g} instances, {config.runtime_per_day}h/day)")

    print("\nDaily Cost:")
    print(f"  • Instances: ₹{result.instance_cost_inr:,.2f} (${result.instance_cost_usd:,.2f})")
    print(f"  • Storage: ₹{result.storage_cost_inr:,.2f} (${result.storage_cost_usd:,.2f})")
    if config.maintenance_enabled:
        print(f"  • Maintenance (+25%): ₹{breakdown.maintenance_cost_inr:,.2f}")
    print(f"  • Total: ₹{result.daily_cost_inr:,.2f} (${result.daily_cost_usd:,.2f})")

    if config.is_budget_to_days:
        print(f"\nBudget ₹{config.budget:,.2f} covers {result.affordable_days:.2f} days")
        print(f"  • Whole days: {result.affordable_whole_days:.0f}")
        print(f"  • Budget used: ₹{result.total_budget_used:,.2f}")
        print(f"  • Remaining: ₹{breakdown.remaining_budget_inr:,.2f}")
    else:
        print(f"\nRequired budget for {config.desired_days:g} days:")
        print(f"  • ₹{result.required_budget_inr:,.2f} (${result.required_budget_usd:,.2f})")

    if breakdown.show_per_person:
        print("\nPer Person:")
        print(f"  • Daily cost: ₹{breakdown.daily_cost_per_person:,.2f}")
        if config.is_budget_to_days:
            print(f"  • Runtime: {breakdown.runtime_days_per_person:.0f} days")
        else:
            print(f"  • Required budget: ₹{breakdown.required_budget_per_person:,.2f}")

    if session.show_optimization_tip:
        print(f"\n💡 Cost Optimization Tip: {OPTIMIZATION_TIP}")


def cmd_estimate(args: argparse.Namespace) -> int:
    """Execute estimate command."""
    try:
        config = build_configuration(args)
        session = BudgetSession(config, CostModel(strict=args.strict))
        result = session.result

        # Output
        if args.format == "json":
            print(export.to_json(config, result))
        elif args.format == "yaml":
            print(export.to_yaml(config, result))
        elif args.format == "markdown":
            print(export.to_markdown(config, result))
        else:  # text
            print_text(session)

        # Save to file if requested
        if args.output:
            export.save(config, result, args.output)
            print(f"\n✓ Saved to {args.output}")

        return 0

    except (LabBudgetError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_presets(args: argparse.Namespace) -> int:
    """Execute presets command."""
    if args.format == "json":
        data = [
            {
                "deployment_type": name,
                "instances_per_person": DEPLOYMENT_PRESETS[name],
                "description": DEPLOYMENT_DESCRIPTIONS[name],
            }
            for name in DEPLOYMENT_TYPES
        ]
        print(json.dumps(data, indent=2))
    else:  # table
        print(f"\n{'Deployment':<15} {'Instances':<10} {'Description':<60}")
        print("-" * 85)
        for name in DEPLOYMENT_TYPES:
            print(f"{name:<15} {DEPLOYMENT_PRESETS[name]:<10} {DEPLOYMENT_DESCRIPTIONS[name]:<60}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "estimate":
        return cmd_estimate(args)
    elif args.command == "presets":
        return cmd_presets(args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
