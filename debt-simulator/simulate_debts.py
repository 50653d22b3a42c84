"""CLI client for the Debt Ledger API. Posts a set of debts and prints a terminal report.

Usage:
    python debt-simulator/simulate_debts.py debts.json
    python debt-simulator/simulate_debts.py debts.json --strategy avalanche --extra 10000

debts.json holds a list of objects with at least principal,
annual_rate_percent and monthly_payment (plus optional id, name,
original_principal, is_cleared).
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _amount(v) -> str:
    return f"{int(v):,}"


def _months(v) -> str:
    return "never" if v is None else f"{v} mo"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_totals(data: dict) -> None:
    totals = data["totals"]
    horizon = data["horizon"]
    _header("Portfolio Summary")
    if horizon["converges"]:
        print(f"  Longest Payoff:     {horizon['period_count']} months ({horizon['years']} years)")
    else:
        print(f"  Longest Payoff:     NEVER (does not pay off: {', '.join(horizon['non_convergent_ids'])})")
    print(f"  Total Balance:      {_amount(totals['total_principal'])}")
    print(f"  Monthly Payments:   {_amount(totals['total_monthly_payment'])}")
    print(f"  Total Interest:     {_amount(totals['total_interest'])}")
    print(f"  Total To Pay:       {_amount(totals['total_paid'])}")
    print(f"  Repaid So Far:      {float(totals['progress_ratio']) * 100:.1f}%")


def print_ranking(data: dict) -> None:
    _header(f"Payoff Plan ({data['strategy']})")
    header = f"  {'#':>2}  {'Debt':<20} {'Balance':>12} {'Rate':>7} {'Monthly':>10} {'Payoff':>9}"
    print(header)
    print(f"  {'-' * (len(header) - 2)}")
    for r in data["ranking"]:
        name = r["name"] or r["id"] or "-"
        print(
            f"  {r['rank']:>2}  {name:<20} {_amount(r['principal']):>12}"
            f" {float(r['annual_rate_percent']):>6.2f}% {_amount(r['monthly_payment']):>10}"
            f" {_months(r['period_count']):>9}"
        )


def print_extra(name: str, data: dict) -> None:
    _header(f"Extra Payment: +{_amount(data['extra'])}/mo on {name}")
    if not data["available"]:
        print("  No comparison available: a schedule does not pay off.")
        return
    print(f"  Months Saved:       {data['periods_saved']}")
    print(f"  Interest Saved:     {_amount(data['interest_saved'])}")


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Simulate debt repayment via the Debt Ledger API"
    )
    parser.add_argument("debts_file", type=Path, help="JSON file with a list of debts")
    parser.add_argument(
        "--strategy",
        choices=["snowball", "avalanche"],
        default="snowball",
        help="Payoff order (default: snowball)",
    )
    parser.add_argument("--extra", type=int, default=0, help="Extra monthly payment on the first debt in the plan")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    try:
        debts = json.loads(args.debts_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Could not read {args.debts_file}: {e}", file=sys.stderr)
        sys.exit(1)

    async with httpx.AsyncClient(base_url=args.api_url, timeout=30) as client:
        try:
            resp = await client.post(
                "/api/v1/portfolio/summary",
                json={"debts": debts, "strategy": args.strategy},
            )
            resp.raise_for_status()
            summary = resp.json()

            extra = None
            if args.extra > 0 and summary["ranking"]:
                first = summary["ranking"][0]
                target = next(
                    d for d in debts
                    if d.get("id", "") == first["id"] and d.get("name", "") == first["name"]
                )
                resp = await client.post(
                    "/api/v1/portfolio/extra-payment",
                    json={"debt": target, "extra": args.extra},
                )
                resp.raise_for_status()
                extra = (first["name"] or first["id"], resp.json())
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn debt_ledger.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.HTTPStatusError as e:
            print(f"Error: API returned {e.response.status_code}", file=sys.stderr)
            print(f"  {e.response.text}", file=sys.stderr)
            sys.exit(1)

    print_totals(summary)
    print_ranking(summary)
    if extra is not None:
        print_extra(*extra)
    print()


if __name__ == "__main__":
    asyncio.run(main())
