"""Terminal walkthrough of the journey + annotation flow.

Runs entirely in-process against a fresh AnnotationStore, so no server
is needed.

Run with:
    nafa-demo
"""

from __future__ import annotations

import asyncio
import logging

from nafa_mvp.domain.annotation import AnnotationInput
from nafa_mvp.domain.sample_journey import SAMPLE_JOURNEY_ID, build_sample_journey
from nafa_mvp.render.formatter import JourneyFormatter
from nafa_mvp.store.annotation_store import AnnotationStore
from nafa_mvp.store.journey_view import JourneyView

_BANNER = """
╔══════════════════════════════════════════════════════════════╗
║              NAFA MVP DEMO - Journey + Annotations           ║
║     Neurodiverse App for Adventurers                         ║
╚══════════════════════════════════════════════════════════════╝
"""

SEED_ANNOTATION = AnnotationInput(
    location_id="city-center-station",
    location_name="City Center Station",
    noise=7,
    light=5,
    crowd=8,
    notes="Very busy during morning rush, quieter after 9am",
)

FORM_ANNOTATION = AnnotationInput(
    location_id="oak-street-stop",
    location_name="Oak Street Bus Stop",
    noise=5,
    light=6,
    crowd=3,
    notes="Sheltered stop, moderate traffic noise from street",
)


async def run_demo(store: AnnotationStore | None = None) -> str:
    """Play the demo flow and return the full transcript."""
    store = store or AnnotationStore()
    view = JourneyView(build_sample_journey(), store)
    fmt = JourneyFormatter
    out: list[str] = [_BANNER]

    await store.insert(SEED_ANNOTATION)

    out.append("📍 STEP 1: Journey Plan View\n")
    out.append(fmt.format_journey(await view.get_journey(SAMPLE_JOURNEY_ID)))

    out.append("📍 STEP 2: Sensory Annotation Flow\n")
    out.append(f"Location: {FORM_ANNOTATION.location_name}\n")
    out.append(f"🔊 {fmt.render_sensory_level('Noise Level', FORM_ANNOTATION.noise)}")
    out.append("   (0 = Silent, 10 = Very Loud)\n")
    out.append(f"💡 {fmt.render_sensory_level('Light Level', FORM_ANNOTATION.light)}")
    out.append("   (0 = Very Dark, 10 = Very Bright)\n")
    out.append(f"👥 {fmt.render_sensory_level('Crowd Level', FORM_ANNOTATION.crowd)}")
    out.append("   (0 = Empty, 10 = Very Crowded)\n")
    out.append(f"📝 Notes: {FORM_ANNOTATION.notes}\n")

    saved = await store.insert(FORM_ANNOTATION)
    out.append(f"✅ ANNOTATION SAVED ({saved.id})\n")

    out.append(fmt.format_annotations(await store.list_all()))
    return "\n".join(out)


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    print(asyncio.run(run_demo()))


if __name__ == "__main__":
    main()
