"""Sample pages shaped like the assets-by-market-cap table."""

from __future__ import annotations

from typing import Iterable, Tuple


def row(rank: str, name: str, cap: str) -> str:
    return (
        f"<tr><td>{rank}</td>"
        f'<td><a href="/x/"><div class="company-name">{name}</div></a></td>'
        f"<td>{cap}</td><td>$1.00</td></tr>"
    )


def table_page(rows: Iterable[Tuple[str, str, str]]) -> str:
    body = "".join(row(*r) for r in rows)
    return (
        "<html><body><table>"
        "<thead><tr><th>Rank</th><th>Name</th><th>Market Cap</th><th>Price</th></tr></thead>"
        f"<tbody>{body}</tbody></table></body></html>"
    )


MARKET_PAGE = table_page([
    ("1", "Gold", "$21.857 T"),
    ("2", "NVIDIA", "$4.120 T"),
    ("3", "Microsoft", "$3.790 T"),
    ("8", "Bitcoin", "$1.900 T"),
    ("9", "Silver", "$1.850 T"),
])

NO_BITCOIN_PAGE = table_page([
    ("1", "Gold", "$21.857 T"),
    ("2", "Silver", "$1.850 T"),
])

NO_TABLE_PAGE = "<html><body><p>Access denied</p></body></html>"

GOLD_CAP = 21_857_000_000_000
BITCOIN_CAP = 1_900_000_000_000
