import unittest
from unittest.mock import Mock

from gdrivels.controller import GoogleDriveController
from gdrivels.errors import FetchError, InvalidArgumentError
from gdrivels.fetcher import list_all_files, page_size_for
from gdrivels.query import build_query


def _paged_service(total: int):
    """Drive service mock serving `total` files, honoring pageSize/pageToken."""
    service = Mock()
    files_resource = Mock()
    service.files.return_value = files_resource

    def list_(**kwargs):
        start = int(kwargs.get("pageToken") or 0)
        end = min(start + kwargs["pageSize"], total)
        payload = {"files": [{"id": f"F{i}", "name": f"f{i}"} for i in range(start, end)]}
        if end < total:
            payload["nextPageToken"] = str(end)
        request = Mock()
        request.execute.return_value = payload
        return request

    files_resource.list.side_effect = list_
    return service, files_resource


class TestPageSize(unittest.TestCase):
    def test_page_size_for(self) -> None:
        self.assertEqual(page_size_for(0), 1000)
        self.assertEqual(page_size_for(-5), 1000)
        self.assertEqual(page_size_for(30), 30)
        self.assertEqual(page_size_for(999), 999)
        self.assertEqual(page_size_for(1000), 1000)
        self.assertEqual(page_size_for(1500), 1000)


class TestListAllFiles(unittest.TestCase):
    def test_cap_spanning_two_pages(self) -> None:
        service, files_resource = _paged_service(2500)
        controller = GoogleDriveController(service)

        files = list_all_files(controller, max_files=1500)

        self.assertEqual(len(files), 1500)
        self.assertEqual(files_resource.list.call_count, 2)
        self.assertEqual(files[0].file_id, "F0")
        self.assertEqual(files[-1].file_id, "F1499")

    def test_unbounded_returns_everything(self) -> None:
        service, files_resource = _paged_service(50)
        files = list_all_files(GoogleDriveController(service), max_files=0)

        self.assertEqual(len(files), 50)
        self.assertEqual(files_resource.list.call_count, 1)

    def test_negative_max_is_unbounded(self) -> None:
        service, files_resource = _paged_service(2100)
        files = list_all_files(GoogleDriveController(service), max_files=-1)

        self.assertEqual(len(files), 2100)
        self.assertEqual(files_resource.list.call_count, 3)

    def test_length_is_min_of_total_and_max(self) -> None:
        for total, max_files in ((0, 10), (5, 10), (10, 10), (25, 10), (1001, 1000)):
            service, _ = _paged_service(total)
            files = list_all_files(GoogleDriveController(service), max_files=max_files)
            self.assertEqual(len(files), min(total, max_files))

    def test_small_cap_uses_cap_as_page_size(self) -> None:
        service, files_resource = _paged_service(100)
        list_all_files(GoogleDriveController(service), max_files=30)

        self.assertEqual(files_resource.list.call_args.kwargs["pageSize"], 30)
        self.assertEqual(files_resource.list.call_count, 1)

    def test_overshooting_page_is_truncated(self) -> None:
        service = Mock()
        files_resource = Mock()
        service.files.return_value = files_resource
        files_resource.list.return_value.execute.return_value = {
            "files": [{"id": str(i)} for i in range(8)],
            "nextPageToken": "more",
        }

        files = list_all_files(GoogleDriveController(service), max_files=5)

        self.assertEqual([f.file_id for f in files], ["0", "1", "2", "3", "4"])

    def test_selection_and_sort_order_are_sent(self) -> None:
        service, files_resource = _paged_service(1)
        list_all_files(
            GoogleDriveController(service),
            query="ignored",
            sort_order="modifiedTime desc",
            selection=2,
        )

        kwargs = files_resource.list.call_args.kwargs
        self.assertEqual(kwargs["q"], build_query("", 2))
        self.assertEqual(kwargs["orderBy"], "modifiedTime desc")

    def test_unknown_selection_fails_before_request(self) -> None:
        service, files_resource = _paged_service(1)
        with self.assertRaises(InvalidArgumentError):
            list_all_files(GoogleDriveController(service), selection=7)
        files_resource.list.assert_not_called()

    def test_api_failure_is_fetch_error(self) -> None:
        service = Mock()
        service.files.return_value.list.return_value.execute.side_effect = OSError("boom")

        with self.assertRaises(FetchError) as ctx:
            list_all_files(GoogleDriveController(service), query="q")

        self.assertTrue(str(ctx.exception).startswith("Failed to list files: "))
        self.assertIn("boom", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
