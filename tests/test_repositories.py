"""
Repository tests: field validation, uniqueness and link tables.
"""

import uuid

import pytest

from pinboard.shared.core.exceptions import DuplicateResourceError, ValidationError
from pinboard.shared.models.enums import Category
from pinboard.shared.repositories import (
    BoardPinRepository,
    BoardRepository,
    CommentRepository,
    PinRepository,
    UserFollowRepository,
    UserRepository,
)


class TestUserRepository:
    """Tests for user validation and lookups."""

    async def test_create_normalizes_email(self, db_session):
        """Emails are stored lower-cased and found in any case."""
        repo = UserRepository(db_session)
        user = await repo.create(
            first_name="Alice",
            email="Alice@Example.COM",
            username="alice",
            password_hash="x",
        )

        assert user.email == "alice@example.com"
        assert (await repo.get_by_email("ALICE@example.com")).id == user.id

    async def test_create_reports_every_invalid_field(self, db_session):
        """All offending fields are named at once."""
        repo = UserRepository(db_session)

        with pytest.raises(ValidationError) as exc_info:
            await repo.create(
                first_name="Al",
                email="not-an-email",
                username="bad name!",
                password_hash="x",
            )

        assert set(exc_info.value.fields) == {"first_name", "email", "username"}

    async def test_missing_required_field(self, db_session):
        repo = UserRepository(db_session)

        with pytest.raises(ValidationError) as exc_info:
            await repo.create(first_name="Alice", email="a@example.com", username="alice")

        assert exc_info.value.fields == ["password_hash"]

    async def test_taken_email_and_username(self, db_session, make_user):
        """A second account with the same email or username is rejected."""
        await make_user("alice")
        repo = UserRepository(db_session)

        with pytest.raises(ValidationError) as exc_info:
            await repo.create(
                first_name="Other",
                email="ALICE@example.com",
                username="alice",
                password_hash="x",
            )

        assert exc_info.value.fields == ["email", "username"]

    async def test_update_ignores_own_username(self, db_session, make_user):
        """Re-submitting your own username is not a conflict."""
        alice = await make_user("alice")
        repo = UserRepository(db_session)

        updated = await repo.update(alice.id, username="alice", bio="Hello")

        assert updated.bio == "Hello"

    async def test_update_rejects_blanked_required_field(self, db_session, make_user):
        alice = await make_user("alice")
        repo = UserRepository(db_session)

        with pytest.raises(ValidationError) as exc_info:
            await repo.update(alice.id, first_name="")

        assert exc_info.value.fields == ["first_name"]

    async def test_update_missing_user(self, db_session):
        repo = UserRepository(db_session)

        assert await repo.update(uuid.uuid4(), bio="x") is None


class TestPinAndBoardRepository:
    """Tests for content repositories."""

    async def test_category_coerced_from_value(self, db_session, make_user):
        """Enum fields accept their display value."""
        alice = await make_user("alice")
        pin = await PinRepository(db_session).create(
            file_id="f",
            file_url="https://cdn.example.com/f.jpg",
            created_by=alice.id,
            category="Food",
        )

        assert pin.category == Category.FOOD

    async def test_unknown_category_rejected(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(ValidationError) as exc_info:
            await BoardRepository(db_session).create(
                title="Ideas",
                created_by=alice.id,
                category="Gardening",
            )

        assert exc_info.value.fields == ["category"]

    async def test_pin_title_too_long(self, db_session, make_user):
        alice = await make_user("alice")

        with pytest.raises(ValidationError) as exc_info:
            await PinRepository(db_session).create(
                title="x" * 101,
                file_id="f",
                file_url="https://cdn.example.com/f.jpg",
                created_by=alice.id,
            )

        assert exc_info.value.fields == ["title"]

    async def test_get_by_ids_preserves_order(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        first = await make_pin(alice)
        second = await make_pin(alice)

        pins = await PinRepository(db_session).get_by_ids([second.id, uuid.uuid4(), first.id])

        assert [pin.id for pin in pins] == [second.id, first.id]

    async def test_secret_boards_filtered(self, db_session, make_user, make_board):
        alice = await make_user("alice")
        public = await make_board(alice)
        secret = await make_board(alice, is_secret=True)
        repo = BoardRepository(db_session)

        assert set(await repo.ids_by_owner(alice.id)) == {public.id, secret.id}
        assert await repo.ids_by_owner(alice.id, include_secret=False) == [public.id]

    async def test_get_by_field_unknown_field(self, db_session):
        with pytest.raises(ValueError):
            await PinRepository(db_session).get_by_field("colour", "red")

    async def test_list_filters_and_pages(self, db_session, make_user, make_board):
        """list() filters on equality and pages without overlap."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        alice_boards = {(await make_board(alice)).id for _ in range(3)}
        await make_board(bob)
        repo = BoardRepository(db_session)

        first = await repo.list(limit=2, filters={"created_by": alice.id}, order_by="created_at")
        rest = await repo.list(
            offset=2, limit=2, filters={"created_by": alice.id}, order_by="created_at"
        )

        assert len(first) == 2
        assert len(rest) == 1
        assert {board.id for board in first + rest} == alice_boards
        assert await repo.count({"created_by": alice.id}) == 3


class TestLinkRepository:
    """Tests for the shared link-table behaviour."""

    async def test_add_contains_remove(self, db_session, make_user):
        alice = await make_user("alice")
        bob = await make_user("bob")
        follows = UserFollowRepository(db_session)

        await follows.add(alice.id, bob.id)

        assert await follows.contains(alice.id, bob.id)
        assert not await follows.contains(bob.id, alice.id)
        assert await follows.targets_of(alice.id) == [bob.id]
        assert await follows.sources_of(bob.id) == [alice.id]

        assert await follows.remove(alice.id, bob.id) is True
        assert await follows.remove(alice.id, bob.id) is False
        assert await follows.count_targets(alice.id) == 0
        assert await follows.count_sources(bob.id) == 0

    async def test_duplicate_add_raises(self, db_session, make_user):
        """A second row for the same pair is a conflict."""
        alice = await make_user("alice")
        bob = await make_user("bob")
        follows = UserFollowRepository(db_session)
        await follows.add(alice.id, bob.id)

        with pytest.raises(DuplicateResourceError):
            await follows.add(alice.id, bob.id)

    async def test_board_pins_keep_append_order(self, db_session, make_user, make_pin, make_board):
        alice = await make_user("alice")
        board = await make_board(alice)
        pins = [await make_pin(alice) for _ in range(3)]
        board_pins = BoardPinRepository(db_session)

        for pin in reversed(pins):
            await board_pins.append(board.id, pin.id)

        assert await board_pins.targets_of(board.id) == [pin.id for pin in reversed(pins)]
        assert await board_pins.next_position(board.id) == 3

    async def test_remove_from_boards_only_touches_given_boards(
        self, db_session, make_user, make_pin, make_board
    ):
        alice = await make_user("alice")
        mine = await make_board(alice)
        other = await make_board(alice)
        pin = await make_pin(alice)
        board_pins = BoardPinRepository(db_session)
        await board_pins.append(mine.id, pin.id)
        await board_pins.append(other.id, pin.id)

        removed = await board_pins.remove_from_boards(pin.id, [mine.id])

        assert removed == 1
        assert await board_pins.sources_of(pin.id) == [other.id]


class TestCommentRepository:
    """Tests for comment threading queries."""

    async def test_threads(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)
        repo = CommentRepository(db_session)

        async def comment(text, parent=None):
            return await repo.create(
                text=text,
                created_by=alice.id,
                pin_id=pin.id,
                parent_id=parent.id if parent else None,
                position=await repo.next_position(pin.id, parent.id if parent else None),
            )

        top = await comment("first")
        second = await comment("second")
        reply = await comment("reply", top)
        nested = await comment("nested", reply)

        assert await repo.top_level_ids(pin.id) == [top.id, second.id]
        assert await repo.reply_ids(top.id) == [reply.id]
        assert await repo.subtree_ids(top.id) == [top.id, reply.id, nested.id]
        assert set(await repo.ids_for_pin(pin.id)) == {top.id, second.id, reply.id, nested.id}

    async def test_empty_text_rejected(self, db_session, make_user, make_pin):
        alice = await make_user("alice")
        pin = await make_pin(alice)

        with pytest.raises(ValidationError) as exc_info:
            await CommentRepository(db_session).create(
                text="",
                created_by=alice.id,
                pin_id=pin.id,
                position=0,
            )

        assert exc_info.value.fields == ["text"]
