"""Unit tests for ImageStorage against a temporary web root."""

import pytest

from food_registration.core.exceptions import ImageValidationError
from food_registration.services.image_storage import ImageStorage, has_upload

from tests.helpers.mock_factories import make_upload


class TestSave:
    @pytest.fixture(autouse=True)
    def _storage(self, tmp_path):
        self.root = tmp_path
        self.storage = ImageStorage(tmp_path, "images", [".jpg", ".png"], max_bytes=16)

    @pytest.mark.asyncio
    async def test_writes_file_and_returns_web_path(self):
        upload = make_upload("Photo.JPG", content=b"jpeg-bytes")

        web_path = await self.storage.save(upload)

        assert web_path.startswith("/images/")
        assert web_path.endswith(".jpg")
        stored = self.root / "images" / web_path.rsplit("/", 1)[1]
        assert stored.read_bytes() == b"jpeg-bytes"
        upload.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejects_unknown_extension(self):
        upload = make_upload("run.exe")

        with pytest.raises(ImageValidationError, match="Unsupported image type"):
            await self.storage.save(upload)
        upload.close.assert_awaited_once()
        assert not (self.root / "images").exists()

    @pytest.mark.asyncio
    async def test_rejects_oversized_upload(self):
        with pytest.raises(ImageValidationError, match="maximum upload size"):
            await self.storage.save(make_upload("big.png", content=b"x" * 17))

    @pytest.mark.asyncio
    async def test_rejects_empty_file(self):
        with pytest.raises(ImageValidationError, match="empty"):
            await self.storage.save(make_upload("blank.png", content=b""))


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_stored_file(self, tmp_path):
        storage = ImageStorage(tmp_path)
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "a.jpg").write_bytes(b"x")

        assert await storage.delete("/images/a.jpg") is True
        assert not (tmp_path / "images" / "a.jpg").exists()

    @pytest.mark.asyncio
    async def test_ignores_missing_and_foreign_paths(self, tmp_path):
        storage = ImageStorage(tmp_path)

        assert await storage.delete(None) is False
        assert await storage.delete("/images/missing.jpg") is False
        assert await storage.delete("https://cdn.example.com/a.jpg") is False

    def test_resolve_stays_inside_images_directory(self, tmp_path):
        storage = ImageStorage(tmp_path)
        assert storage.resolve("/images/../../etc/passwd") == tmp_path / "images" / "passwd"


class TestHasUpload:
    def test_none_is_not_an_upload(self):
        assert has_upload(None) is False

    def test_empty_filename_is_not_an_upload(self):
        assert has_upload(make_upload("")) is False

    def test_named_file_is_an_upload(self):
        assert has_upload(make_upload("a.png")) is True
