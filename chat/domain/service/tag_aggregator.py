"""Grouping of tag search results.

A message matched by a tag search is keyed by the exact set of query tag
ids it carries, not by its full tag list. Messages with the same key share
a group; a message matching a subset or superset of another's ids lands in
a different group.
"""

from typing import Iterable, Sequence

from chat.domain.model import Message, MessageSummary, Tag, TagGroup


def matching_tag_ids(message: Message, query_ids: set[str]) -> tuple[str, ...]:
    """Sorted, distinct ids of the message's tags that are in query_ids."""
    return tuple(sorted({tag.id for tag in message.tags if tag.id in query_ids}))


def group_by_tag_combination(
    messages: Iterable[Message],
    query_tags: Sequence[Tag],
    limit: int,
) -> list[TagGroup]:
    """Group messages by their matching tag combination.

    Messages are taken in creation order. Groups are ordered by their
    earliest message. At most ``limit`` groups are returned and each group
    keeps at most ``limit`` messages. Deleted messages and messages with no
    matching tag are skipped.

    Args:
        messages: Candidate messages
        query_tags: Tags to match, compared by id
        limit: Cap on groups and on messages per group

    Returns:
        One group per distinct matching combination
    """
    query_ids = {tag.id for tag in query_tags}
    groups: dict[tuple[str, ...], list[MessageSummary]] = {}

    for message in sorted(messages, key=lambda m: m.created):
        if message.deleted:
            continue

        key = matching_tag_ids(message, query_ids)
        if not key:
            continue

        if key not in groups:
            if len(groups) >= limit:
                continue
            groups[key] = []

        bucket = groups[key]
        if len(bucket) < limit:
            bucket.append(
                MessageSummary(
                    sender_id=message.sender_id,
                    message=message.text,
                    tags=message.tags,
                )
            )

    return [
        TagGroup(tag_combination=list(key), messages=bucket)
        for key, bucket in groups.items()
    ]
