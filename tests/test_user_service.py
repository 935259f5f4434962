"""
UserService tests: account views, profile updates and account deletion.
"""

import pytest

from pinboard.shared.core.exceptions import (
    AuthenticationError,
    UserNotFoundError,
    ValidationError,
)
from pinboard.shared.repositories import (
    BoardPinRepository,
    CommentLikeRepository,
    CommentRepository,
    PinLikeRepository,
    UserFollowRepository,
)
from pinboard.shared.services import (
    BoardService,
    EngagementService,
    PinService,
    RelationService,
    UserService,
)


class TestProfiles:
    """Tests for get_current and get_profile."""

    async def test_profile_hides_secret_boards(self, db_session, make_user, make_board):
        alice = await make_user("alice")
        bob = await make_user("bob")
        public = await make_board(alice)
        await make_board(alice, is_secret=True)

        profile = await UserService(db_session).get_profile(bob.id, "alice")

        assert profile.user.id == alice.id
        assert profile.board_ids == [public.id]
        assert profile.public_board_ids == [public.id]

    async def test_own_view_includes_secret_boards(self, db_session, make_user, make_board):
        alice = await make_user("alice")
        public = await make_board(alice)
        secret = await make_board(alice, is_secret=True)

        view = await UserService(db_session).get_current(alice.id)

        assert set(view.board_ids) == {public.id, secret.id}
        assert view.public_board_ids == [public.id]

    async def test_unknown_username(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(UserNotFoundError):
            await UserService(db_session).get_profile(alice.id, "nobody")


class TestUpdateProfile:
    """Tests for update_profile."""

    async def test_partial_update(self, db_session, make_user):
        alice = await make_user("alice", surname="Smith")

        view = await UserService(db_session).update_profile(alice.id, bio="Potter")

        assert view.user.bio == "Potter"
        assert view.user.surname == "Smith"

    async def test_username_taken(self, db_session, make_user):
        alice = await make_user("alice")
        await make_user("bob")

        with pytest.raises(ValidationError) as exc_info:
            await UserService(db_session).update_profile(alice.id, username="bob")

        assert exc_info.value.fields == ["username"]

    async def test_bio_too_long(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(ValidationError) as exc_info:
            await UserService(db_session).update_profile(alice.id, bio="x" * 161)

        assert exc_info.value.fields == ["bio"]


class TestDeleteAccount:
    """Tests for delete_account."""

    async def test_delete_removes_everything(self, db_session, make_user, make_pin, make_board):
        """No other user, pin or board refers to a deleted account."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        alice_pin = await make_pin(alice)
        bob_pin = await make_pin(bob)
        bob_board = await make_board(bob)
        await make_board(alice)

        relations = RelationService(db_session)
        await relations.follow_toggle(alice.id, bob.id)
        await relations.follow_toggle(bob.id, alice.id)
        await relations.save_to_board(bob.id, alice_pin.id, bob_board.id)
        await relations.save_to_board(alice.id, bob_pin.id)
        await EngagementService(db_session).like_pin(alice.id, bob_pin.id)
        comment = await relations.add_comment(alice.id, bob_pin.id, "Great")
        await relations.add_reply(bob.id, bob_pin.id, comment.id, "Cheers")

        await UserService(db_session).delete_account(alice.id)

        with pytest.raises(AuthenticationError):
            await UserService(db_session).get_current(alice.id)

        bob_view = await UserService(db_session).get_current(bob.id)
        assert bob_view.following_ids == []
        assert bob_view.follower_ids == []
        assert bob_view.saved_pin_ids == []

        assert await BoardPinRepository(db_session).targets_of(bob_board.id) == []
        assert await PinLikeRepository(db_session).targets_of(bob_pin.id) == []
        assert await CommentRepository(db_session).ids_for_pin(bob_pin.id) == []

        bob_pin_view = await PinService(db_session).get_pin(bob.id, bob_pin.id)
        assert bob_pin_view.saved_by_ids == []
        assert bob_pin_view.comment_ids == []

    async def test_other_users_content_survives(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        bob = await make_user("bob")
        bob_pin = await make_pin(bob)
        board = await BoardService(db_session).create_board(bob.id, "Mine", collaborators=[alice.id])

        await UserService(db_session).delete_account(alice.id)

        view = await BoardService(db_session).get_board(bob.id, board.board.id)
        assert view.collaborator_ids == []
        assert (await PinService(db_session).get_pin(bob.id, bob_pin.id)).pin.id == bob_pin.id
        assert await UserFollowRepository(db_session).count_sources(bob.id) == 0

    async def test_delete_own_reply_chain(self, db_session, make_user, make_pin):
        """A user replying to their own comment leaves no orphaned thread rows."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        bob_pin = await make_pin(bob)
        relations = RelationService(db_session)
        top = await relations.add_comment(alice.id, bob_pin.id, "First")
        own_reply = await relations.add_reply(alice.id, bob_pin.id, top.id, "And another thing")
        await relations.add_reply(bob.id, bob_pin.id, own_reply.id, "Noted")
        await EngagementService(db_session).like_comment(bob.id, own_reply.id)
        kept = await relations.add_comment(bob.id, bob_pin.id, "Still here")

        await UserService(db_session).delete_account(alice.id)

        assert await CommentRepository(db_session).ids_for_pin(bob_pin.id) == [kept.id]
        assert await CommentLikeRepository(db_session).targets_of(own_reply.id) == []
