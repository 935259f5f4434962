"""
RelationService tests: follows, saves and comment threads.
"""

import uuid

import pytest

from pinboard.shared.core.exceptions import (
    CommentNotFoundError,
    ConflictError,
    InvalidOperationError,
    PinNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from pinboard.shared.repositories import BoardCollaboratorRepository, BoardPinRepository
from pinboard.shared.services import (
    AccessGate,
    PinService,
    RelationService,
    UserService,
)


class TestFollow:
    """Tests for follow_toggle."""

    async def test_follow_updates_both_sides(self, db_session, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob", first_name="Bobby")
        service = RelationService(db_session)

        result = await service.follow_toggle(alice.id, bob.id)

        assert result.following is True
        assert result.following_count == 1
        assert result.followers_count == 1
        assert result.message == "You started following Bobby"

        users = UserService(db_session)
        assert (await users.get_current(alice.id)).following_ids == [bob.id]
        assert (await users.get_current(bob.id)).follower_ids == [alice.id]

    async def test_follow_twice_unfollows(self, db_session, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob")
        service = RelationService(db_session)

        await service.follow_toggle(alice.id, bob.id)
        result = await service.follow_toggle(alice.id, bob.id)

        assert result.following is False
        assert result.following_count == 0
        assert result.followers_count == 0
        assert result.message.startswith("Now you are not following")

        users = UserService(db_session)
        assert (await users.get_current(alice.id)).following_ids == []
        assert (await users.get_current(bob.id)).follower_ids == []

    async def test_follow_is_one_directional(self, db_session, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob")

        await RelationService(db_session).follow_toggle(alice.id, bob.id)

        view = await UserService(db_session).get_current(bob.id)
        assert view.following_ids == []

    async def test_cannot_follow_self(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(InvalidOperationError):
            await RelationService(db_session).follow_toggle(alice.id, alice.id)

    async def test_unknown_target(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(UserNotFoundError):
            await RelationService(db_session).follow_toggle(alice.id, uuid.uuid4())


class TestSave:
    """Tests for save_to_board and unsave."""

    async def test_save_without_board(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)

        result = await RelationService(db_session).save_to_board(bob.id, pin.id)

        assert result.saved_by_count == 1
        assert result.board_id is None
        assert (await UserService(db_session).get_current(bob.id)).saved_pin_ids == [pin.id]
        assert (await PinService(db_session).get_pin(bob.id, pin.id)).saved_by_ids == [bob.id]

    async def test_save_to_own_board_appends(self, db_session, make_user, make_pin, make_board):
        alice = await make_user("alice")
        bob = await make_user("bob")
        board = await make_board(bob)
        first = await make_pin(alice)
        second = await make_pin(alice)
        service = RelationService(db_session)

        await service.save_to_board(bob.id, first.id, board.id)
        await service.save_to_board(bob.id, second.id, board.id)

        assert await BoardPinRepository(db_session).targets_of(board.id) == [first.id, second.id]

    async def test_save_twice_conflicts(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)
        service = RelationService(db_session)
        await service.save_to_board(alice.id, pin.id)

        with pytest.raises(ConflictError):
            await service.save_to_board(alice.id, pin.id)

    async def test_save_to_someone_elses_board(self, db_session, make_user, make_pin, make_board):
        """Nothing is saved when the board is not writable."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        board = await make_board(alice)
        pin = await make_pin(alice)

        with pytest.raises(InvalidOperationError):
            await RelationService(db_session).save_to_board(bob.id, pin.id, board.id)

        assert (await UserService(db_session).get_current(bob.id)).saved_pin_ids == []
        assert await BoardPinRepository(db_session).targets_of(board.id) == []

    async def test_save_to_missing_board(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)

        with pytest.raises(InvalidOperationError):
            await RelationService(db_session).save_to_board(alice.id, pin.id, uuid.uuid4())

    async def test_collaborator_may_save_when_allowed(
        self, db_session, make_user, make_pin, make_board
    ):
        alice = await make_user("alice")
        bob = await make_user("bob")
        board = await make_board(alice)
        pin = await make_pin(alice)
        await BoardCollaboratorRepository(db_session).add(board.id, bob.id)
        gate = AccessGate(db_session, allow_collaborator_saves=True)

        await RelationService(db_session, gate=gate).save_to_board(bob.id, pin.id, board.id)

        assert await BoardPinRepository(db_session).targets_of(board.id) == [pin.id]

    async def test_collaborator_blocked_when_disallowed(
        self, db_session, make_user, make_pin, make_board
    ):
        alice = await make_user("alice")
        bob = await make_user("bob")
        board = await make_board(alice)
        pin = await make_pin(alice)
        await BoardCollaboratorRepository(db_session).add(board.id, bob.id)
        gate = AccessGate(db_session, allow_collaborator_saves=False)

        with pytest.raises(InvalidOperationError):
            await RelationService(db_session, gate=gate).save_to_board(bob.id, pin.id, board.id)

    async def test_save_unknown_pin(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(PinNotFoundError):
            await RelationService(db_session).save_to_board(alice.id, uuid.uuid4())

    async def test_unsave_removes_from_own_boards(
        self, db_session, make_user, make_pin, make_board
    ):
        alice = await make_user("alice")
        bob = await make_user("bob")
        board = await make_board(bob)
        pin = await make_pin(alice)
        service = RelationService(db_session)
        await service.save_to_board(bob.id, pin.id, board.id)

        result = await service.unsave(bob.id, pin.id)

        assert result.saved_by_count == 0
        assert await BoardPinRepository(db_session).targets_of(board.id) == []
        assert (await UserService(db_session).get_current(bob.id)).saved_pin_ids == []

    async def test_unsave_when_not_saved(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)

        with pytest.raises(InvalidOperationError):
            await RelationService(db_session).unsave(alice.id, pin.id)


class TestComments:
    """Tests for add_comment and add_reply."""

    async def test_comments_listed_in_order(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        service = RelationService(db_session)

        first = await service.add_comment(bob.id, pin.id, "First!")
        second = await service.add_comment(alice.id, pin.id, "Thanks")

        view = await PinService(db_session).get_pin(alice.id, pin.id)
        assert view.comment_ids == [first.id, second.id]
        assert [comment.text for comment in view.comments] == ["First!", "Thanks"]

    async def test_reply_not_listed_on_pin(self, db_session, make_user, make_pin):
        """A reply joins its parent's replies, not the pin's comments."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        pin = await make_pin(alice)
        service = RelationService(db_session)
        comment = await service.add_comment(bob.id, pin.id, "Where is this?")

        reply = await service.add_reply(alice.id, pin.id, comment.id, "Lisbon")

        assert reply.parent_id == comment.id
        view = await PinService(db_session).get_pin(alice.id, pin.id)
        assert view.comment_ids == [comment.id]

    async def test_reply_to_comment_on_other_pin(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)
        other = await make_pin(alice)
        service = RelationService(db_session)
        comment = await service.add_comment(alice.id, pin.id, "Hello")

        with pytest.raises(InvalidOperationError):
            await service.add_reply(alice.id, other.id, comment.id, "Hi")

    async def test_reply_to_unknown_comment(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)

        with pytest.raises(CommentNotFoundError):
            await RelationService(db_session).add_reply(alice.id, pin.id, uuid.uuid4(), "Hi")

    async def test_comment_text_too_long(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)

        with pytest.raises(ValidationError) as exc_info:
            await RelationService(db_session).add_comment(alice.id, pin.id, "x" * 301)

        assert exc_info.value.fields == ["text"]

    async def test_comment_on_unknown_pin(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(PinNotFoundError):
            await RelationService(db_session).add_comment(alice.id, uuid.uuid4(), "Hello")
