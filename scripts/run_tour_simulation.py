import asyncio
import os
import sys

# Allow running as `python scripts/run_tour_simulation.py` from the repo root.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger

from locations.store import load_location_store
from routing.osrm_client import OSRMClient
from routing.policy import default_routing_policy
from routing.route_service import RouteResolver
from selection.controller import SelectionController
from tourmap.adapter import RenderAdapter
from tourmap.widget import FoliumMapWidget


def print_state(adapter: RenderAdapter, controller: SelectionController, label: str) -> None:
    selected = sorted(adapter.cards.indices_with("selected"))
    expanded = sorted(adapter.cards.indices_with("expanded"))
    print(f"\n--- {label} ---")
    print(f"State: {controller.state.value} | selected: {selected} | expanded: {expanded}")
    if adapter.panel.visible:
        print(f"Panel: {adapter.panel.text} [{adapter.panel.clear_label}]")
    else:
        print("Panel: hidden")


async def main(data_path="sampledata/tour.json", output_path="tour_map.html"):
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    store = load_location_store(os.path.join(base_dir, data_path))
    policy = default_routing_policy()
    widget = FoliumMapWidget(center=store.point(0).coordinates)

    resolver = RouteResolver(
        osrm=OSRMClient(timeout=10),
        policy=policy,
        distance_fn=widget.distance_between,
    )
    controller = SelectionController(store, resolver, policy=policy)
    adapter = RenderAdapter(widget, store, policy=policy)
    adapter.bind(controller)

    controller.card_click(0)
    print_state(adapter, controller, "Card 1 clicked")

    widget.fire("click", 1)
    await controller.wait_pending()
    print_state(adapter, controller, "Marker 2 clicked")

    controller.card_click(2)
    await controller.wait_pending()
    print_state(adapter, controller, "Card 3 clicked (oldest evicted)")

    out = widget.save(os.path.join(base_dir, output_path))
    logger.info(f"Map written to {out}")

    widget.fire("click")
    print_state(adapter, controller, "Map background clicked")


if __name__ == "__main__":
    asyncio.run(main())
