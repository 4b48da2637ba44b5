"""Unit tests for toast notifications."""
import asyncio

import pytest

from chatmock.conversation import TOAST_TIMEOUT, Toast, ToastKind, ToastNotifier


class TestToastNotifier:
    """Tests for ToastNotifier."""

    def test_default_timeout(self):
        assert ToastNotifier().timeout == TOAST_TIMEOUT == 3.0

    @pytest.mark.asyncio
    async def test_toast_auto_dismisses(self):
        """Test that a toast disappears after the timeout."""
        notifier = ToastNotifier(timeout=0.05)
        notifier.show(Toast("Saved"))

        assert notifier.current == Toast("Saved", ToastKind.SUCCESS)
        await asyncio.sleep(0.1)
        assert notifier.current is None

    @pytest.mark.asyncio
    async def test_new_toast_resets_timer(self):
        """Test that a replacement toast cancels the earlier dismissal."""
        notifier = ToastNotifier(timeout=0.1)
        notifier.show(Toast("first"))
        await asyncio.sleep(0.06)

        notifier.show(Toast("second", ToastKind.ERROR))
        await asyncio.sleep(0.06)
        assert notifier.current == Toast("second", ToastKind.ERROR)

        await asyncio.sleep(0.1)
        assert notifier.current is None

    @pytest.mark.asyncio
    async def test_listeners_see_show_and_dismiss(self):
        seen = []
        notifier = ToastNotifier(timeout=10)
        notifier.subscribe(seen.append)

        notifier.show(Toast("a"))
        notifier.show(Toast("b"))
        notifier.dismiss()
        notifier.dismiss()

        assert seen == [Toast("a"), Toast("b"), None]
