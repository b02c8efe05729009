"""
Itinerary Exporter - Renders the itinerary as a downloadable Markdown document.
"""
from datetime import datetime
from typing import Optional

from ..models.itinerary import Itinerary


class ItineraryExporter:
    """Formats an itinerary and its totals. Pure formatting, no side effects."""

    media_type = "text/markdown"

    def __init__(self, currency: Optional[str] = None):
        if currency is None:
            from ..config import settings
            currency = settings.currency
        self.currency = currency

    def filename(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        return f"itinerary-{now.strftime('%Y%m%d')}.md"

    def render(self, itinerary: Itinerary, title: str = "Your Itinerary") -> str:
        summary = itinerary.aggregate()
        lines = [f"# {title}", ""]

        if not len(itinerary):
            lines.append("_Your itinerary is empty._")
        else:
            lines.append("| # | Title | Type | Duration | Travel | Location | Cost |")
            lines.append("|---|---|---|---|---|---|---|")
            for position, item in enumerate(itinerary, start=1):
                lines.append(
                    f"| {position} | {self._cell(item.title)} | {item.category.value} "
                    f"| {self._cell(item.duration)} | {self._cell(item.travel_time)} "
                    f"| {self._cell(item.location)} | {self._money(item.cost)} |"
                )

        lines += [
            "",
            "## Trip Summary",
            "",
            f"- Total activities: {summary.item_count}",
            f"- Destinations: {summary.location_count}",
            f"- Activity time: {summary.activity_time}",
            f"- Travel time: {summary.travel_time}",
            f"- Total time: {summary.total_time}",
            f"- Estimated total cost: {self._money(summary.total_cost)}",
            "",
        ]
        return "\n".join(lines)

    def render_bytes(self, itinerary: Itinerary) -> bytes:
        return self.render(itinerary).encode("utf-8")

    def _money(self, amount: float) -> str:
        return f"{self.currency} {amount:,.2f}"

    @staticmethod
    def _cell(text: str) -> str:
        return text.replace("|", "\\|").replace("\n", " ")
