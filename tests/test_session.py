"""Unit and property-based tests for the editor session."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatmock.conversation import (
    DEFAULT_PARTICIPANTS,
    LIKE_GLYPH,
    QUICK_REACT_EMOJI,
    QUICK_REACT_NAME,
    EditorSession,
    ImageDecodeError,
    InvalidIndex,
    MessageSide,
    MessageType,
    SetAvatar,
    SetName,
    initial_state,
    parse_names,
)
from chatmock.persistence import ParticipantStore, create_key_value_store


def make_session() -> EditorSession:
    return EditorSession(ParticipantStore(create_key_value_store("memory")))


class TestInitialState:
    """Tests for the start-up snapshot."""

    def test_defaults_and_seed_messages(self, session):
        """Test that a new session holds the default pair and two seed messages."""
        state = session.state

        assert [p.name for p in state.participants] == ["Phương QL", "PHAN XUAN"]
        assert [m.id for m in state.messages] == ["1", "2"]
        assert state.side == MessageSide.LEFT
        assert state.selected_message_id is None
        assert state.draft == ""
        assert state.chat_title == "Group Chat"

    def test_seed_reactions(self, session):
        """Test the seed reactions of the first message."""
        first = session.state.messages[0]

        assert [r.emoji for r in first.reactions] == ["😍", "OK", "❤️", "👏"]
        assert first.reaction_for("❤️").names == ("PHAN XUAN", "bách")


class TestAddMessage:
    """Tests for add_message."""

    def test_text_message_from_right_side(self, session):
        """Test that a draft sent from the right side is attributed to participant 2."""
        session.set_side(MessageSide.RIGHT)
        session.set_draft("hello")

        message = session.add_message("text")

        assert len(session.state.messages) == 3
        assert session.state.messages[-1] == message
        assert message.sender_id == "user-2"
        assert message.text == "hello"
        assert message.reactions == ()
        assert message.type == MessageType.TEXT
        assert message.side == MessageSide.RIGHT
        assert message.timestamp == "02:05 PM"

    def test_text_message_clears_draft(self, session):
        """Test that sending text clears the draft."""
        session.set_draft("hello")
        session.add_message()

        assert session.state.draft == ""

    @pytest.mark.parametrize("draft", ["", "   ", "\n\t"])
    def test_blank_draft_is_ignored(self, session, draft):
        """Test that blank drafts add nothing and keep the draft."""
        session.set_draft(draft)

        assert session.add_message("text") is None
        assert len(session.state.messages) == 2
        assert session.state.draft == draft

    def test_like_message_uses_glyph(self, session):
        """Test that a like is the fixed glyph and leaves the draft alone."""
        session.set_draft("keep me")

        message = session.add_message("like")

        assert message.text == LIKE_GLYPH
        assert message.type == MessageType.LIKE
        assert session.state.draft == "keep me"

    def test_image_message_uses_content(self, session):
        """Test that an image message stores the given reference."""
        message = session.add_message(MessageType.IMAGE, "data:image/png;base64,AAAA")

        assert message.text == "data:image/png;base64,AAAA"
        assert message.type == MessageType.IMAGE

    @pytest.mark.parametrize("content", [None, ""])
    def test_image_without_reference_is_ignored(self, session, content):
        """Test that an image message needs an image reference."""
        assert session.add_message("image", content) is None
        assert len(session.state.messages) == 2

    def test_ids_are_unique(self, session):
        """Test that messages added within the same millisecond get distinct ids."""
        for _ in range(50):
            session.add_message("like")

        ids = [m.id for m in session.state.messages]
        assert len(ids) == len(set(ids))

    def test_sender_follows_renamed_participant(self, session):
        """Test that the sender id stays valid after a rename."""
        session.update_participant(0, SetName("Alice"))
        message = session.add_message("like")

        assert session.state.resolve_sender(message).name == "Alice"

    @given(st.lists(st.sampled_from(["text", "blank", "image", "like"]), max_size=20))
    def test_length_grows_by_one_per_non_blank_call(self, calls):
        """Property test: only blank text calls leave the message count unchanged."""
        session = make_session()
        expected = len(session.state.messages)

        for call in calls:
            if call == "text":
                session.set_draft("hi")
                session.add_message("text")
                expected += 1
            elif call == "blank":
                session.set_draft(" ")
                session.add_message("text")
            else:
                session.add_message(call, "data:image/png;base64,AAAA")
                expected += 1

            assert len(session.state.messages) == expected


class TestDeleteMessage:
    """Tests for delete_message."""

    def test_delete_removes_message(self, session):
        assert session.delete_message("2") is True
        assert [m.id for m in session.state.messages] == ["1"]

    def test_delete_twice_is_noop(self, session):
        """Test that deleting the same id again does nothing."""
        session.delete_message("2")
        before = session.state

        assert session.delete_message("2") is False
        assert session.state == before

    def test_delete_selected_clears_selection(self, session):
        session.select_message("1")
        session.delete_message("1")

        assert session.state.selected_message_id is None

    def test_delete_other_keeps_selection(self, session):
        session.select_message("1")
        session.delete_message("2")

        assert session.state.selected_message_id == "1"


class TestUpdateReaction:
    """Tests for update_reaction."""

    def test_parse_names_trims_and_drops_blanks(self):
        assert parse_names(" A , B,, ,C ") == ("A", "B", "C")
        assert parse_names("") == ()

    def test_empty_names_remove_group(self, session):
        """Test that an empty list removes the emoji's group."""
        session.update_reaction("1", "😍", "")

        emojis = [r.emoji for r in session.state.messages[0].reactions]
        assert emojis == ["OK", "❤️", "👏"]

    def test_whitespace_variants_store_same_names(self, session):
        """Test that "A, B" and "A,B" produce identical state."""
        session.update_reaction("2", "👍", "A, B")
        first = session.state

        session.update_reaction("2", "👍", "A,B")

        assert session.state == first
        assert session.state.messages[1].reaction_for("👍").names == ("A", "B")

    def test_equal_input_is_idempotent(self, session):
        """Test that re-entering the existing heart reactors keeps the same names."""
        session.update_reaction("1", "❤️", "PHAN XUAN, bách")

        group = session.state.messages[0].reaction_for("❤️")
        assert group.names == ("PHAN XUAN", "bách")
        assert len(session.state.messages[0].reactions) == 4

    def test_unknown_message_is_noop(self, session):
        before = session.state
        session.update_reaction("missing", "OK", "A")

        assert session.state == before

    def test_quick_react_replaces_heart_group(self, session):
        """Test that quick react sets the heart to the placeholder reactor."""
        session.quick_react("1")

        group = session.state.messages[0].reaction_for(QUICK_REACT_EMOJI)
        assert group.names == (QUICK_REACT_NAME,)

    @given(st.lists(
        st.tuples(
            st.sampled_from(["😍", "OK", "❤️", "👏", "👍", "🔥"]),
            st.lists(st.sampled_from(["A", " B ", "", "C"]), max_size=4),
        ),
        max_size=25,
    ))
    def test_one_group_per_emoji(self, edits):
        """Property test: every emoji appears at most once and never empty."""
        session = make_session()

        for emoji, names in edits:
            session.update_reaction("2", emoji, ",".join(names))

            reactions = session.state.messages[1].reactions
            emojis = [r.emoji for r in reactions]
            assert len(emojis) == len(set(emojis))
            assert all(r.names for r in reactions)


class TestParticipants:
    """Tests for participant updates."""

    def test_set_name(self, session):
        session.update_participant(1, SetName("Bob"))

        assert session.state.participants[1].name == "Bob"
        assert session.state.participants[0] == DEFAULT_PARTICIPANTS[0]

    def test_set_avatar(self, session):
        session.update_participant(0, SetAvatar("data:image/png;base64,AAAA"))

        assert session.state.participants[0].avatar == "data:image/png;base64,AAAA"

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_invalid_index(self, session, index):
        """Test that indexes outside the pair raise InvalidIndex."""
        with pytest.raises(InvalidIndex):
            session.update_participant(index, SetName("X"))

        assert len(session.state.participants) == 2

    def test_invalid_index_is_an_index_error(self, session):
        with pytest.raises(IndexError):
            session.update_participant(5, SetName("X"))


class TestSelectionAndObservers:
    """Tests for transient UI state and subscriptions."""

    def test_select_unknown_message_is_ignored(self, session):
        session.select_message("missing")

        assert session.state.selected_message_id is None

    def test_listeners_receive_snapshots(self, session):
        """Test that every mutation publishes a whole new snapshot."""
        received = []
        session.subscribe(received.append)
        old = session.state

        session.set_draft("x")
        session.add_message()

        assert len(received) == 2
        assert received[-1] is session.state
        assert old.messages == initial_state().messages


class TestUploadImage:
    """Tests for background image decoding."""

    @pytest.mark.asyncio
    async def test_upload_appends_image_message(self, session, png_bytes):
        """Test that an upload without target appends an image message."""
        await session.upload_image(png_bytes)

        message = session.state.messages[-1]
        assert len(session.state.messages) == 3
        assert message.type == MessageType.IMAGE
        assert message.text.startswith("data:image/png;base64,")

    @pytest.mark.asyncio
    async def test_upload_sets_avatar(self, session, png_bytes):
        """Test that an upload with a target index only changes the avatar."""
        await session.upload_image(png_bytes, 0)

        assert session.state.participants[0].avatar.startswith("data:image/png;base64,")
        assert len(session.state.messages) == 2

    @pytest.mark.asyncio
    async def test_upload_applies_to_current_state(self, session, png_bytes):
        """Test that changes made while decoding are kept."""
        task = session.upload_image(png_bytes)
        session.set_side(MessageSide.RIGHT)
        session.delete_message("1")

        await task

        assert [m.id for m in session.state.messages][0] == "2"
        assert session.state.messages[-1].sender_id == "user-2"

    @pytest.mark.asyncio
    async def test_upload_invalid_index_fails_immediately(self, session, png_bytes):
        with pytest.raises(InvalidIndex):
            session.upload_image(png_bytes, 3)

    @pytest.mark.asyncio
    async def test_upload_rejects_non_images(self, session):
        """Test that undecodable bytes raise and change nothing."""
        with pytest.raises(ImageDecodeError):
            await session.upload_image(b"definitely not an image")

        assert len(session.state.messages) == 2
