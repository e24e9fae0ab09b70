"""Unit tests for the cuisine commands."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cookmeet.application.commands.cuisine import (
    AddCuisineCommand,
    DeleteCuisineCommand,
    SetCuisineCommand,
)
from cookmeet.application.dtos import IconUpload
from cookmeet.application.ports.storage import InvalidStoragePathError, StorageError
from cookmeet.domain.cuisine import (
    Cuisine,
    CuisineAccessDeniedError,
    CuisineDeletionError,
    CuisineNotFoundError,
    CuisinePatch,
)
from cookmeet.domain.shared.exceptions import FieldValidationError, PersistenceError

USER_ID = 1
BUCKET = "cookmeet"


@pytest.fixture
def mock_cuisine_repo():
    """Create a mock cuisine repository."""
    repo = AsyncMock()
    repo.get = AsyncMock()
    repo.create = AsyncMock(side_effect=lambda cuisine: cuisine)
    repo.delete = AsyncMock()
    repo.update_fields = AsyncMock()
    repo.count_icon_references = AsyncMock(return_value=1)
    return repo


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.put = AsyncMock(side_effect=lambda bucket, key, *_: f"http://cdn/{key}")
    storage.delete = AsyncMock()
    storage.key_for_url = MagicMock(
        side_effect=lambda bucket, url: url.removeprefix("http://cdn/"),
    )
    return storage


@pytest.fixture
def icon():
    return IconUpload(filename="dish.JPG", content_type="image/jpeg", data=b"jpeg")


def _cuisine(owner_id=USER_ID, icon_url=None):
    return Cuisine(
        id=10,
        owner_id=owner_id,
        title="Pasta",
        icon_url=icon_url,
    )


class TestAddCuisineCommand:
    """Tests for AddCuisineCommand."""

    @pytest.fixture
    def command(self, mock_cuisine_repo, mock_storage):
        return AddCuisineCommand(mock_cuisine_repo, mock_storage, USER_ID, BUCKET)

    @pytest.mark.asyncio
    async def test_add_without_icon(self, command, mock_cuisine_repo, mock_storage):
        cuisine = await command.execute(title="Pasta", url="http://r", comment="yum")

        assert cuisine.owner_id == USER_ID
        assert cuisine.icon_url is None
        mock_storage.put.assert_not_called()
        mock_cuisine_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_with_icon(self, command, mock_storage, icon):
        cuisine = await command.execute(title="Pasta", icon=icon)

        key = mock_storage.put.call_args.args[1]
        assert key.startswith(f"images/{USER_ID}/")
        assert key.endswith(".jpg")
        assert cuisine.icon_url == f"http://cdn/{key}"

    @pytest.mark.asyncio
    async def test_missing_title_discards_uploaded_icon(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
        icon,
    ):
        with pytest.raises(FieldValidationError, match="title is required"):
            await command.execute(title="", icon=icon)

        key = mock_storage.put.call_args.args[1]
        mock_storage.delete.assert_awaited_once_with(BUCKET, key)
        mock_cuisine_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_failure_error_wins_over_cleanup_error(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
        icon,
    ):
        mock_cuisine_repo.create.side_effect = PersistenceError("insert failed")
        mock_storage.delete.side_effect = StorageError("bucket unavailable")

        with pytest.raises(PersistenceError):
            await command.execute(title="Pasta", icon=icon)

        mock_storage.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_discard_upload_after_success_removes_icon(
        self,
        command,
        mock_storage,
        icon,
    ):
        await command.execute(title="Pasta", icon=icon)
        key = mock_storage.put.call_args.args[1]

        await command.discard_upload()
        await command.discard_upload()

        mock_storage.delete.assert_awaited_once_with(BUCKET, key)

    @pytest.mark.asyncio
    async def test_discard_upload_without_icon_is_noop(self, command, mock_storage):
        await command.execute(title="Pasta")

        await command.discard_upload()

        mock_storage.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_failure_aborts_insert(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
        icon,
    ):
        mock_storage.put.side_effect = StorageError("timeout")

        with pytest.raises(StorageError):
            await command.execute(title="Pasta", icon=icon)

        mock_cuisine_repo.create.assert_not_called()


class TestDeleteCuisineCommand:
    """Tests for DeleteCuisineCommand."""

    @pytest.fixture
    def command(self, mock_cuisine_repo, mock_storage):
        return DeleteCuisineCommand(mock_cuisine_repo, mock_storage, USER_ID, BUCKET)

    @pytest.mark.asyncio
    async def test_delete_without_icon(self, command, mock_cuisine_repo, mock_storage):
        mock_cuisine_repo.get.return_value = _cuisine()

        await command.execute(10)

        mock_cuisine_repo.delete.assert_awaited_once_with(10)
        mock_storage.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_removes_icon(self, command, mock_cuisine_repo, mock_storage):
        mock_cuisine_repo.get.return_value = _cuisine(
            icon_url="http://cdn/images/1/a.png",
        )

        await command.execute(10)

        mock_storage.delete.assert_awaited_once_with(BUCKET, "images/1/a.png")
        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
    ):
        mock_cuisine_repo.get.return_value = _cuisine(
            owner_id=2,
            icon_url="http://cdn/images/2/a.png",
        )

        with pytest.raises(CuisineAccessDeniedError, match="unauthorized"):
            await command.execute(10)

        mock_cuisine_repo.delete.assert_not_called()
        mock_storage.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_icon_cleanup_failure_does_not_block_delete(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
    ):
        mock_cuisine_repo.get.return_value = _cuisine(
            icon_url="http://cdn/images/1/a.png",
        )
        mock_storage.delete.side_effect = StorageError("boom")

        await command.execute(10)

        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_foreign_icon_url_is_skipped(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
    ):
        mock_cuisine_repo.get.return_value = _cuisine(
            icon_url="http://elsewhere/a.png",
        )
        mock_storage.key_for_url.side_effect = None
        mock_storage.key_for_url.return_value = None

        await command.execute(10)

        mock_storage.delete.assert_not_called()
        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_icon_shared_with_another_cuisine_is_kept(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
    ):
        icon_url = f"http://cdn/cuisine_icons/{USER_ID}/abc.png"
        mock_cuisine_repo.get.return_value = _cuisine(icon_url=icon_url)
        mock_cuisine_repo.count_icon_references.return_value = 2

        await command.execute(10)

        mock_cuisine_repo.count_icon_references.assert_awaited_once_with(icon_url)
        mock_storage.delete.assert_not_called()
        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "key",
        [
            "cuisine_icons/abc.png",
            "cuisine_icons/2/abc.png",
            "images/2/a.png",
            "icons/1/me.png",
        ],
    )
    async def test_icon_outside_owner_namespace_is_kept(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
        key,
    ):
        mock_cuisine_repo.get.return_value = _cuisine(icon_url=f"http://cdn/{key}")

        await command.execute(10)

        mock_storage.delete.assert_not_called()
        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_unsafe_icon_path_does_not_block_delete(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
    ):
        mock_cuisine_repo.get.return_value = _cuisine(
            icon_url="http://cdn/images/1/link.png",
        )
        mock_storage.delete.side_effect = InvalidStoragePathError("images/1/link.png")

        await command.execute(10)

        mock_cuisine_repo.delete.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_missing_cuisine(self, command, mock_cuisine_repo):
        mock_cuisine_repo.get.side_effect = CuisineNotFoundError(10)

        with pytest.raises(CuisineNotFoundError):
            await command.execute(10)

        mock_cuisine_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_row_vanishing_before_delete(self, command, mock_cuisine_repo):
        mock_cuisine_repo.get.return_value = _cuisine()
        mock_cuisine_repo.delete.side_effect = CuisineNotFoundError(10)

        with pytest.raises(CuisineDeletionError, match="failed to delete cuisine"):
            await command.execute(10)


class TestSetCuisineCommand:
    """Tests for SetCuisineCommand."""

    @pytest.fixture
    def command(self, mock_cuisine_repo, mock_storage):
        return SetCuisineCommand(mock_cuisine_repo, mock_storage, USER_ID, BUCKET)

    @pytest.mark.asyncio
    async def test_title_only(self, command, mock_cuisine_repo):
        await command.execute(10, title="Soba")

        mock_cuisine_repo.update_fields.assert_awaited_once_with(
            10,
            CuisinePatch(title="Soba"),
        )

    @pytest.mark.asyncio
    async def test_empty_update_reads_row(self, command, mock_cuisine_repo):
        mock_cuisine_repo.get.return_value = _cuisine()

        result = await command.execute(10)

        assert result.id == 10
        mock_cuisine_repo.update_fields.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, command, mock_cuisine_repo):
        with pytest.raises(FieldValidationError):
            await command.execute(10, title="  ")

        mock_cuisine_repo.update_fields.assert_not_called()

    @pytest.mark.asyncio
    async def test_icon_uses_content_addressed_key(
        self,
        command,
        mock_cuisine_repo,
        mock_storage,
        icon,
    ):
        await command.execute(10, icon=icon)

        key = mock_storage.put.call_args.args[1]
        assert key.startswith(f"cuisine_icons/{USER_ID}/")
        assert key.endswith(".jpg")
        _, patch = mock_cuisine_repo.update_fields.call_args.args
        assert patch == CuisinePatch(icon_url=f"http://cdn/{key}")
