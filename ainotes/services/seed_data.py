"""Synthetic note corpus used by the seed workflow."""

from __future__ import annotations

SEED_NOTES: list[tuple[str, str]] = [
    (
        "Sourdough starter schedule",
        "Feed the starter twice a day at a 1:1:1 ratio. It peaks about six hours "
        "after feeding in a warm kitchen; use it for the dough right at the peak.",
    ),
    (
        "Python asyncio pitfalls",
        "Never call blocking I/O inside a coroutine. Use asyncio.gather for fan-out "
        "and a Semaphore to bound concurrency. Cancellation surfaces as CancelledError.",
    ),
    (
        "Trip planning: Lisbon",
        "Three days in Lisbon: Alfama on foot, tram 28 early in the morning, a day "
        "trip to Sintra, and pastel de nata in Belém.",
    ),
    (
        "Quarterly OKR draft",
        "Objective: improve onboarding. Key results: cut time-to-first-note to under "
        "two minutes, raise week-one retention by 10%, ship the guided tour.",
    ),
    (
        "Book notes: Deep Work",
        "Schedule focus blocks, batch shallow tasks, and embrace boredom. Depth is "
        "a skill that needs deliberate practice and protection from distraction.",
    ),
    (
        "Home network upgrade",
        "Replace the old router with a mesh system, move the NAS onto a wired "
        "backhaul, and put IoT devices on a separate VLAN.",
    ),
    (
        "Marathon training week 6",
        "Long run of 26 km at easy pace, two interval sessions, one tempo run. "
        "Watch the left knee; add mobility work after each session.",
    ),
    (
        "PostgreSQL index tuning",
        "Check pg_stat_statements for slow queries. Add a composite index on "
        "(owner_id, created_at) and verify with EXPLAIN ANALYZE.",
    ),
    (
        "Gift ideas",
        "Mum: gardening gloves and a pruning saw. Sam: a board game, maybe Azul. "
        "Grandpa: a large-print crossword book.",
    ),
    (
        "Meeting notes: design review",
        "Agreed to move embeddings generation off the request path. Open question: "
        "how to backfill notes created while the provider was down.",
    ),
    (
        "Houseplant care",
        "Monstera: water when the top 5 cm is dry. Snake plant: once a month. "
        "Rotate the fiddle-leaf fig weekly for even growth.",
    ),
    (
        "Machine learning reading list",
        "Attention Is All You Need, the word2vec papers, and a survey of "
        "contrastive learning for sentence embeddings.",
    ),
    (
        "Budget review",
        "Groceries over budget by 12%. Cancel two unused streaming subscriptions "
        "and move the savings into the travel fund.",
    ),
    (
        "Guitar practice log",
        "Worked on barre chords and the F major transition. Metronome at 70 bpm "
        "for the strumming pattern; aim for 80 next week.",
    ),
    (
        "Kitchen renovation quotes",
        "Three quotes received. The cheapest excludes plumbing. Ask about lead "
        "times for quartz worktops and the warranty on cabinets.",
    ),
    (
        "Docker cleanup commands",
        "docker system prune removes stopped containers and dangling images. Add "
        "--volumes carefully; it deletes unused named volumes too.",
    ),
    (
        "Birdwatching at the estuary",
        "Spotted curlews, a little egret and a flock of dunlin. Best viewing is "
        "two hours before high tide from the northern hide.",
    ),
    (
        "Interview questions for backend role",
        "Ask about designing idempotent APIs, handling partial failures in batch "
        "jobs, and how they would test code that calls an external LLM.",
    ),
    (
        "Weekly meal prep",
        "Roast a tray of vegetables, cook a pot of lentils, and prepare overnight "
        "oats for five days. Freeze half of the chili.",
    ),
    (
        "Photography tips: low light",
        "Open the aperture, raise ISO before lowering shutter speed, brace against "
        "a wall, and shoot in RAW to recover shadows later.",
    ),
    (
        "Vector search notes",
        "Cosine similarity ignores magnitude. For a few thousand notes a brute-force "
        "scan is fine; approximate indexes only pay off at much larger scale.",
    ),
    (
        "Volunteer shift schedule",
        "Food bank sorting on Saturday mornings, 9 to 12. Swap the second week with "
        "Priya. Bring the van keys back on Sunday.",
    ),
    (
        "Spanish vocabulary",
        "Madrugada: the early hours. Sobremesa: lingering at the table after a meal. "
        "Estrenar: to use or wear something for the first time.",
    ),
    (
        "Bike maintenance checklist",
        "Check tyre pressure, clean and lube the chain, inspect brake pads, and "
        "true the rear wheel before the club ride.",
    ),
    (
        "Side project ideas",
        "A CLI that turns meeting transcripts into action items, a tiny RSS reader, "
        "and a recipe scaler that converts units.",
    ),
]
