"""
BoardCollaborator Repository

Collaborators of boards. targets_of(board) is the board's
``collaborators`` set; sources_of(user) lists the boards a user
collaborates on.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.board_collaborator import BoardCollaborator
from pinboard.shared.repositories.base import LinkRepository


class BoardCollaboratorRepository(LinkRepository[BoardCollaborator]):
    left_column = "board_id"
    right_column = "user_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(BoardCollaborator, session)
