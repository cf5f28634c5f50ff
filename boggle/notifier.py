import logging
from collections import defaultdict

import httpx

logger = logging.getLogger("boggle")


def build_message(words: list[str], size: int, words_per_group: int = 10) -> tuple[str, str]:
    """Return (title, body) summarizing a solve, grouped longest words first."""
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)

    title = f"Boggle {size}x{size} - {len(words)} words"

    selected = []
    for length in sorted(by_length, reverse=True):
        selected.extend(by_length[length][:words_per_group])

    counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items(), reverse=True))
    body = ",".join(selected) + "\n\n" + counts if words else "No words found"
    return title, body


async def send_notification(
    words: list[str],
    size: int,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    words_per_group: int = 10,
):
    """Send solve results to ntfy.sh. Best-effort, failures are logged, not raised."""
    title, body = build_message(words, size, words_per_group)
    try:
        async with httpx.AsyncClient(timeout=10.0) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Priority": "high",
                    "Tags": "game_die",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)
    except httpx.HTTPError as e:
        logger.error("Failed to send notification: %s", e)
