"""Unit tests for UploadCollector - slot selection and change notifications."""

import pytest

from tryon_studio.services import UploadCollector


class Recorder:
    """Collects every list pushed to the subscriber."""

    def __init__(self):
        self.calls = []

    def __call__(self, images):
        self.calls.append([img.source_file.filename for img in images])


class TestSingleMode:
    """Tests for the person slot behaviour."""

    @pytest.mark.asyncio
    async def test_second_batch_replaces_first(self, make_file):
        """Two single-file batches leave only the second image."""
        recorder = Recorder()
        collector = UploadCollector("single", on_change=recorder)

        await collector.add_files([make_file("first.png")])
        await collector.add_files([make_file("second.png")])

        assert [img.source_file.filename for img in collector.images] == ["second.png"]
        assert recorder.calls == [["first.png"], ["second.png"]]

    @pytest.mark.asyncio
    async def test_batch_truncated_to_one(self, make_file):
        collector = UploadCollector("single")

        images = await collector.add_files([make_file("a.png"), make_file("b.png")])

        assert [img.source_file.filename for img in images] == ["a.png"]

    @pytest.mark.asyncio
    async def test_preview_is_data_url(self, make_file):
        collector = UploadCollector("single")

        images = await collector.add_files([make_file("a.jpg", "image/jpeg")])

        assert images[0].preview_url.startswith("data:image/jpeg;base64,")


class TestMultipleMode:
    """Tests for the outfit slot behaviour."""

    @pytest.mark.asyncio
    async def test_batches_append_in_order(self, make_file):
        collector = UploadCollector("multiple")

        await collector.add_files([make_file("a.png"), make_file("b.png")])
        await collector.add_files([make_file("c.png")])

        assert [img.source_file.filename for img in collector.images] == ["a.png", "b.png", "c.png"]

    @pytest.mark.asyncio
    async def test_remove_shifts_later_images(self, make_file):
        """[a, b] minus index 0 is [b]; minus index 0 again is []."""
        recorder = Recorder()
        collector = UploadCollector("multiple", on_change=recorder)
        await collector.add_files([make_file("a.png"), make_file("b.png")])

        collector.remove(0)
        assert [img.source_file.filename for img in collector.images] == ["b.png"]

        collector.remove(0)
        assert collector.images == []
        assert recorder.calls == [["a.png", "b.png"], ["b.png"], []]

    @pytest.mark.asyncio
    async def test_remove_out_of_range(self, make_file):
        recorder = Recorder()
        collector = UploadCollector("multiple", on_change=recorder)
        await collector.add_files([make_file("a.png")])

        with pytest.raises(IndexError):
            collector.remove(3)
        with pytest.raises(IndexError):
            collector.remove(-1)
        assert len(recorder.calls) == 1

    @pytest.mark.asyncio
    async def test_empty_batch_is_ignored(self, make_file):
        recorder = Recorder()
        collector = UploadCollector("multiple", on_change=recorder)

        images = await collector.add_files([])

        assert images == []
        assert recorder.calls == []

    @pytest.mark.asyncio
    async def test_reset_clears_and_notifies(self, make_file):
        recorder = Recorder()
        collector = UploadCollector("multiple", on_change=recorder)
        await collector.add_files([make_file("a.png")])

        collector.reset()

        assert collector.images == []
        assert recorder.calls[-1] == []

    def test_images_is_a_copy(self):
        collector = UploadCollector("multiple")
        collector.images.append("junk")

        assert collector.images == []


class TestDragState:
    """Tests for the drop-target flag."""

    def test_enter_and_leave(self):
        collector = UploadCollector("single")
        assert collector.is_active is False

        collector.drag_enter()
        assert collector.is_active is True
        collector.drag_over()
        assert collector.is_active is True
        collector.drag_leave()
        assert collector.is_active is False

    @pytest.mark.asyncio
    async def test_drop_clears_flag_and_adds(self, make_file):
        collector = UploadCollector("multiple")
        collector.drag_over()

        images = await collector.drop([make_file("dropped.png")])

        assert collector.is_active is False
        assert [img.source_file.filename for img in images] == ["dropped.png"]


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        UploadCollector("many")
