"""Parent/child linking for decoded day files.

A parent line ``+ <n> <label>`` owns the ``n`` lines that follow it. Linking
turns the flat decoded sequence into records whose parents hold their
children and whose children point back at their parent.
"""

import logging

from daytodo.domain.shared.result import Err, Ok, Result

from .errors import StructuralLinkError
from .models import DecodedLine, TaskRecord

logger = logging.getLogger(__name__)


def link_records(decoded: list[DecodedLine]) -> Result[list[TaskRecord], StructuralLinkError]:
    """Claim children for every parent group, in file order.

    Args:
        decoded: Output of the codec for one file.

    Returns:
        Ok(list of records in file order) or Err(StructuralLinkError) when a
        group runs past the end of the file or overlaps another group.
    """
    records = [item.record for item in decoded]
    index = 0
    while index < len(decoded):
        item = decoded[index]
        if item.group_size is None:
            index += 1
            continue

        claimed = decoded[index + 1 : index + 1 + item.group_size]
        if len(claimed) < item.group_size:
            return Err(
                StructuralLinkError(
                    line_number=item.line_number,
                    expected=item.group_size,
                    available=len(claimed),
                    reason="not enough lines follow the subtask group",
                )
            )
        for child in claimed:
            if child.group_size is not None:
                return Err(
                    StructuralLinkError(
                        line_number=child.line_number,
                        expected=item.group_size,
                        available=len(claimed),
                        reason=f"group starting on line {item.line_number} overlaps another group",
                    )
                )

        _attach(item.record, [child.record for child in claimed], item.line_number)
        index += 1 + item.group_size

    return Ok(records)


def _attach(parent: TaskRecord, children: list[TaskRecord], line_number: int) -> None:
    parent.children = children
    for child in children:
        child.is_subtask = True
        child.parent = parent

    stored = parent.done
    if parent.refresh_done() != stored:
        logger.warning(
            f"Line {line_number}: parent {parent.text!r} was stored as "
            f"{'done' if stored else 'open'}, derived from subtasks instead"
        )
    logger.debug(f"Linked {len(children)} subtasks to {parent.text!r}")
