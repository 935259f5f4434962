"""
PinService tests.
"""

import uuid

import pytest

from pinboard.shared.core.exceptions import AuthorizationError, PinNotFoundError
from pinboard.shared.models.enums import Category, MediaType
from pinboard.shared.repositories import CommentLikeRepository, CommentRepository
from pinboard.shared.services import (
    AccessGate,
    EngagementService,
    PinService,
    RelationService,
    UserService,
)


class TestCreatePin:
    """Tests for create_pin."""

    async def test_pin_in_created_list(self, db_session, make_user):
        alice = await make_user("alice")
        service = PinService(db_session)

        view = await service.create_pin(
            alice.id,
            file_id="pinboard/bowl",
            file_url="https://cdn.example.com/bowl.png",
            file_type=MediaType.IMAGE_PNG,
            title="Glazed bowl",
            category=Category.ART,
            tags=["ceramics"],
        )

        assert view.pin.created_by == alice.id
        assert view.pin.file_type == MediaType.IMAGE_PNG
        assert view.pin.tags == ["ceramics"]
        assert [pin.pin.id for pin in await service.list_created(alice.id)] == [view.pin.id]
        assert (await UserService(db_session).get_current(alice.id)).created_pin_ids == [
            view.pin.id
        ]

    async def test_defaults(self, db_session, make_user):
        alice = await make_user("alice")

        view = await PinService(db_session).create_pin(
            alice.id, file_id="f", file_url="https://cdn.example.com/f.jpg"
        )

        assert view.pin.title == ""
        assert view.pin.category == Category.OTHER
        assert view.pin.file_type == MediaType.IMAGE_JPEG
        assert view.like_ids == []
        assert view.saved_by_ids == []
        assert view.comment_ids == []


class TestListPins:
    """Tests for the home feed and saved pins."""

    async def test_pagination(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        created = {(await make_pin(alice)).id for _ in range(5)}
        service = PinService(db_session)

        first = await service.list_pins(alice.id, page=1, per_page=2)
        second = await service.list_pins(alice.id, page=2, per_page=2)
        last = await service.list_pins(alice.id, page=3, per_page=2)

        assert first.total == 5
        assert first.has_next and not first.has_prev
        assert second.has_next and second.has_prev
        assert not last.has_next and last.has_prev
        seen = [view.pin.id for page in (first, second, last) for view in page.items]
        assert len(seen) == 5
        assert set(seen) == created

    async def test_empty_feed(self, db_session, make_user):
        alice = await make_user("alice")

        page = await PinService(db_session).list_pins(alice.id)

        assert page.items == []
        assert page.total == 0
        assert not page.has_next

    async def test_saved_pins(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        await make_pin(alice)
        await RelationService(db_session).save_to_board(bob.id, pin.id)

        saved = await PinService(db_session).list_saved(bob.id)

        assert [view.pin.id for view in saved] == [pin.id]


class TestUpdatePin:
    """Tests for update_pin."""

    async def test_author_updates(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice, description="Old")

        view = await PinService(db_session).update_pin(alice.id, pin.id, title="New title")

        assert view.pin.title == "New title"
        assert view.pin.description == "Old"

    async def test_other_user_rejected(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)

        with pytest.raises(AuthorizationError):
            await PinService(db_session).update_pin(bob.id, pin.id, title="Mine")

    async def test_other_user_allowed_when_not_enforced(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        gate = AccessGate(db_session, enforce_content_ownership=False)

        view = await PinService(db_session, gate=gate).update_pin(bob.id, pin.id, title="Edited")

        assert view.pin.title == "Edited"

    async def test_unknown_pin(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(PinNotFoundError):
            await PinService(db_session).update_pin(alice.id, uuid.uuid4(), title="x")


class TestDeletePin:
    """Tests for delete_pin."""

    async def test_delete_cleans_up_relations(
        self, db_session, make_user, make_pin, make_board
    ):
        """No user, board or comment list refers to a deleted pin."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        board = await make_board(bob)
        relations = RelationService(db_session)
        await relations.save_to_board(bob.id, pin.id, board.id)
        await EngagementService(db_session).like_pin(bob.id, pin.id)
        comment = await relations.add_comment(bob.id, pin.id, "Nice")
        await relations.add_reply(alice.id, pin.id, comment.id, "Thanks")
        await EngagementService(db_session).like_comment(alice.id, comment.id)
        service = PinService(db_session)

        await service.delete_pin(alice.id, pin.id)

        with pytest.raises(PinNotFoundError):
            await service.get_pin(alice.id, pin.id)
        assert (await UserService(db_session).get_current(bob.id)).saved_pin_ids == []
        assert (await UserService(db_session).get_current(alice.id)).created_pin_ids == []
        assert await CommentRepository(db_session).ids_for_pin(pin.id) == []
        assert await CommentLikeRepository(db_session).targets_of(comment.id) == []

    async def test_other_user_cannot_delete(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        service = PinService(db_session)

        with pytest.raises(AuthorizationError):
            await service.delete_pin(bob.id, pin.id)

        assert (await service.get_pin(alice.id, pin.id)).pin.id == pin.id
