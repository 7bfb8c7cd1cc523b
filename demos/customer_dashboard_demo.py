"""
Console walkthrough of the customer dashboard data lifecycle:
generate -> read stats -> clean -> reset.

Run with: python -m demos.customer_dashboard_demo
"""

from analytics.dataset import CustomerDataset
from config.config import CustomerGenerationConfig
from models.enums import DashboardView, DatasetEventType
from models.events import DatasetEvent
from utils.event_bus import EventBus
from utils.logger import get_logger

logger = get_logger("demos.customer_dashboard")

VIEW_TITLES = {
    DashboardView.DASHBOARD: "Analytics Overview",
    DashboardView.DATA_MANAGEMENT: "Data Preprocessing",
    DashboardView.INSIGHTS: "Insight Generation",
}


def render_stats(event: DatasetEvent) -> None:
    """Stand-in for each dashboard view re-rendering on change."""
    stats = event.payload["stats"]
    for view in DashboardView:
        print(
            f"[{event.event_type.value:>9}] {VIEW_TITLES[view]:<18} customers={stats['total_customers']:4d} "
            f"avg_age={stats['avg_age']:.1f} avg_income={stats['avg_income']:.1f}k "
            f"avg_score={stats['avg_spending_score']:.1f} churn={stats['churn_rate']:.1%}"
        )


def main() -> CustomerDataset:
    bus = EventBus()
    bus.subscribe_all(render_stats)
    bus.subscribe(
        DatasetEventType.CLEANED,
        lambda event: logger.info(f"Cleaning removed {event.payload['removed_count']} records"),
    )

    dataset = CustomerDataset(event_bus=bus, generation_config=CustomerGenerationConfig.from_env())
    dataset.generate()

    for gender, stats in dataset.stats_by_gender().items():
        print(f"  {gender.value:<6} n={stats.total_customers} churn={stats.churn_rate:.1%}")

    result = dataset.clean()
    print(result.message)
    dataset.reset()
    return dataset


if __name__ == "__main__":
    main()
