"""
Export utilities for cost estimates.

Supports JSON, YAML, and a printable Markdown report.
"""

import json
import logging
import math
from datetime import date
from typing import Any

import yaml

from lab_budget.core.cost import (
    OPTIMIZATION_TIP,
    CostBreakdown,
    CostResult,
    should_show_optimization_tip,
)
from lab_budget.domain import (
    DEFAULT_PRICING,
    DEPLOYMENT_DESCRIPTIONS,
    Configuration,
    PricingRates,
    deployment_label,
)

logger = logging.getLogger(__name__)


def _number(value: float) -> float | str:
    """Keep finite numbers; spell out inf/nan so output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def _inr(value: float) -> str:
    """Format an INR amount with 2 decimals."""
    return f"₹{value:,.2f}"


def _days(value: float) -> str:
    """Format a whole-day count (inf/nan as-is)."""
    if not math.isfinite(value):
        return str(value)
    return f"{int(value)}"


def to_dict(
    config: Configuration,
    result: CostResult,
    pricing: PricingRates | None = None,
) -> dict[str, Any]:
    """
    Convert a configuration and its result to a dictionary.

    Args:
        config: Configuration the result was computed from
        result: Cost model output
        pricing: Pricing used (defaults if None)

    Returns:
        Dictionary representation
    """
    pricing = pricing or DEFAULT_PRICING
    breakdown = CostBreakdown.from_result(config, result, pricing)

    return {
        "configuration": {key: _number(value) for key, value in config.to_dict().items()},
        "pricing": {
            "instance_type": pricing.instance_type,
            "ec2_rate_usd": pricing.ec2_rate_usd,
            "volume_type": pricing.volume_type,
            "storage_rate_usd": pricing.storage_rate_usd,
            "maintenance_multiplier": pricing.maintenance_multiplier,
            "days_per_month": pricing.days_per_month,
        },
        "results": {
            "mode": result.mode.value,
            "daily_cost_usd": _number(result.daily_cost_usd),
            "daily_cost_inr": _number(result.daily_cost_inr),
            "instance_cost_usd": _number(result.instance_cost_usd),
            "instance_cost_inr": _number(result.instance_cost_inr),
            "storage_cost_usd": _number(result.storage_cost_usd),
            "storage_cost_inr": _number(result.storage_cost_inr),
            "affordable_days": _number(result.affordable_days),
            "total_budget_used": _number(result.total_budget_used),
            "required_budget_inr": _number(result.required_budget_inr),
            "required_budget_usd": _number(result.required_budget_usd),
        },
        "breakdown": {
            "total_instances": _number(breakdown.total_instances),
            "maintenance_cost_inr": _number(breakdown.maintenance_cost_inr),
            "remaining_budget_inr": _number(breakdown.remaining_budget_inr),
            "per_person": {
                "daily_cost_inr": _number(breakdown.daily_cost_per_person),
                "instance_cost_inr": _number(breakdown.instance_cost_per_person),
                "storage_cost_inr": _number(breakdown.storage_cost_per_person),
                "maintenance_cost_inr": _number(breakdown.maintenance_cost_per_person),
                "required_budget_inr": _number(breakdown.required_budget_per_person),
                "runtime_days": _number(breakdown.runtime_days_per_person),
            } if breakdown.show_per_person else None,
        },
        "optimization_tip": OPTIMIZATION_TIP if should_show_optimization_tip(config, result) else None,
    }


def to_json(
    config: Configuration,
    result: CostResult,
    pricing: PricingRates | None = None,
    indent: int = 2,
) -> str:
    """
    Export an estimate to JSON.

    Args:
        config: Configuration
        result: Cost model output
        pricing: Pricing used (defaults if None)
        indent: JSON indentation

    Returns:
        JSON string
    """
    return json.dumps(to_dict(config, result, pricing), indent=indent, ensure_ascii=False)


def to_yaml(
    config: Configuration,
    result: CostResult,
    pricing: PricingRates | None = None,
) -> str:
    """
    Export an estimate to YAML.

    Args:
        config: Configuration
        result: Cost model output
        pricing: Pricing used (defaults if None)

    Returns:
        YAML string
    """
    return yaml.safe_dump(
        to_dict(config, result, pricing),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def to_markdown(
    config: Configuration,
    result: CostResult,
    pricing: PricingRates | None = None,
    generated_on: date | None = None,
) -> str:
    """
    Export an estimate to a printable Markdown report.

    Args:
        config: Configuration
        result: Cost model output
        pricing: Pricing used (defaults if None)
        generated_on: Report date (today if None)

    Returns:
        Markdown string
    """
    pricing = pricing or DEFAULT_PRICING
    generated_on = generated_on or date.today()
    breakdown = CostBreakdown.from_result(config, result, pricing)
    users = config.number_of_users
    multi_user = breakdown.show_per_person

    lines = [
        "# Lab Budget Analysis",
        "",
        "Cost Estimation Report",
        "",
        f"**Report Generated**: {generated_on.day} {generated_on:%B %Y}",
        "",
        "## Configuration Summary",
        "",
        f"- **Deployment Type**: {deployment_label(config.deployment_type)} "
        f"({DEPLOYMENT_DESCRIPTIONS[config.deployment_type]})",
        f"- **Runtime per Day**: {config.runtime_per_day} hours",
        f"- **Instances per Person**: {config.instances_per_person}",
        f"- **Number of Users**: {users}",
        f"- **Total Instances**: {breakdown.total_instances}",
        f"- **Storage per Instance**: {config.storage_per_instance} GB",
        f"- **Exchange Rate**: ₹{config.exchange_rate}/USD",
        f"- **Maintenance**: {'Enabled (+25%)' if config.maintenance_enabled else 'Disabled'}",
        "",
    ]

    if config.is_budget_to_days:
        lines.extend([
            f"## {_days(result.affordable_whole_days)} Days",
            "",
            f"Estimated runtime within ₹{config.budget} budget "
            f"({_inr(result.total_budget_used)} used).",
            "",
            f"Remaining budget: {_inr(breakdown.remaining_budget_inr)}.",
            "",
        ])
    else:
        lines.extend([
            f"## {_inr(result.required_budget_inr)}",
            "",
            f"Required budget for {config.desired_days} days "
            f"(${result.required_budget_usd:,.2f}).",
            "",
        ])

    if multi_user:
        if config.is_budget_to_days:
            first = f"- **Runtime per Person**: {_days(breakdown.runtime_days_per_person)} Days"
        else:
            first = f"- **Required Budget per Person**: {_inr(breakdown.required_budget_per_person)}"

        lines.extend([
            "## Per Person Analysis",
            "",
            first,
            f"- **Daily Cost per Person**: {_inr(breakdown.daily_cost_per_person)}",
            f"- **Instance Cost per Person**: {_inr(breakdown.instance_cost_per_person)}",
            f"- **Storage Cost per Person**: {_inr(breakdown.storage_cost_per_person)}",
            "",
        ])

    def row(label: str, total: float, share: float) -> str:
        if multi_user:
            return f"| {label} | {_inr(total)} | {_inr(share)} |"
        return f"| {label} | {_inr(total)} |"

    title = f"Total Daily Cost Breakdown ({users} Users)" if multi_user else "Daily Cost Breakdown"
    lines.extend([
        f"## {title}",
        "",
        "| Item | Cost | Per Person |" if multi_user else "| Item | Cost |",
        "|---|---:|---:|" if multi_user else "|---|---:|",
        row(
            f"Instance Cost ({config.instances_per_person} × {users} × {config.runtime_per_day}h)",
            breakdown.instance_cost_inr,
            breakdown.instance_cost_per_person,
        ),
        row(
            f"Storage Cost ({config.storage_per_instance}GB × {config.instances_per_person} × {users})",
            breakdown.storage_cost_inr,
            breakdown.storage_cost_per_person,
        ),
    ])

    if config.maintenance_enabled:
        lines.append(row(
            "Maintenance Cost (+25%)",
            breakdown.maintenance_cost_inr,
            breakdown.maintenance_cost_per_person,
        ))

    lines.extend([
        row("**Total Daily Cost**", breakdown.daily_cost_inr, breakdown.daily_cost_per_person),
        "",
        "## Pricing Reference",
        "",
        f"- **EC2 ({pricing.instance_type})**: ${pricing.ec2_rate_usd}/hour",
        f"- **{pricing.volume_type} Storage**: ${pricing.storage_rate_usd}/GB-month",
        "",
    ])

    if should_show_optimization_tip(config, result):
        lines.extend([
            f"> **Cost Optimization Tip**: {OPTIMIZATION_TIP}",
            "",
        ])

    return "\n".join(lines)


def save(
    config: Configuration,
    result: CostResult,
    filepath: str,
    format: str = "auto",
    pricing: PricingRates | None = None,
) -> None:
    """
    Save an estimate to file.

    Args:
        config: Configuration
        result: Cost model output
        filepath: Output file path
        format: Format ('json', 'yaml', 'md', or 'auto' to detect from extension)
        pricing: Pricing used (defaults if None)
    """
    if format == "auto":
        if filepath.endswith(".json"):
            format = "json"
        elif filepath.endswith(".yaml") or filepath.endswith(".yml"):
            format = "yaml"
        elif filepath.endswith(".md"):
            format = "md"
        else:
            format = "json"  # Default

    if format == "json":
        content = to_json(config, result, pricing)
    elif format == "yaml":
        content = to_yaml(config, result, pricing)
    elif format == "md":
        content = to_markdown(config, result, pricing)
    else:
        raise ValueError(f"Unknown format: {format}")

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Saved {format} estimate to {filepath}")
