import io
import unittest
from datetime import datetime, timezone

from gdrivels.models import FileRecord
from gdrivels.renderer import TableWriter, file_row, print_file_list
from gdrivels.util.mime import FOLDER_MIME

DT = datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


def _render(files, **kwargs) -> list[str]:
    out = io.StringIO()
    print_file_list(out, files, tz=timezone.utc, **kwargs)
    return out.getvalue().splitlines()


class TestTableWriter(unittest.TestCase):
    def test_columns_padded_to_widest_cell(self) -> None:
        out = io.StringIO()
        writer = TableWriter(out)
        writer.add_row(("a", "bb", "c"))
        writer.add_row(("aaaa", "b", "cccccc"))
        writer.flush()

        self.assertEqual(
            out.getvalue(),
            "a      bb   c\n"
            "aaaa   b    cccccc\n",
        )

    def test_nothing_written_before_flush(self) -> None:
        out = io.StringIO()
        writer = TableWriter(out)
        writer.add_row(("a", "b"))
        self.assertEqual(out.getvalue(), "")


class TestPrintFileList(unittest.TestCase):
    def test_header_and_rows(self) -> None:
        files = [
            FileRecord(
                file_id="F1",
                name="report.pdf",
                mime_type="application/pdf",
                size=1500,
                modified_time=DT,
            ),
            FileRecord(file_id="D1", name="docs", mime_type=FOLDER_MIME, modified_time=DT),
        ]
        lines = _render(files)

        self.assertEqual(
            lines,
            [
                "Id   Name         Type   Size     ModifiedTime",
                "F1   report.pdf   bin    1.5 KB   2025-03-04 05:06:07",
                "D1   docs         dir             2025-03-04 05:06:07",
            ],
        )

    def test_skip_header(self) -> None:
        files = [FileRecord(file_id="F1", name="n", mime_type="text/plain")]
        lines = _render(files, skip_header=True)
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("F1"))

    def test_empty_listing_prints_header_only(self) -> None:
        self.assertEqual(_render([]), ["Id   Name   Type   Size   ModifiedTime"])
        self.assertEqual(_render([], skip_header=True), [])

    def test_rows_keep_input_order(self) -> None:
        files = [
            FileRecord(file_id=fid, name=fid, mime_type="text/plain")
            for fid in ("c", "a", "b")
        ]
        lines = _render(files, skip_header=True)
        self.assertEqual([line.split()[0] for line in lines], ["c", "a", "b"])


class TestFileRow(unittest.TestCase):
    def test_folder_size_blank_in_both_modes(self) -> None:
        folder = FileRecord(file_id="D1", name="docs", mime_type=FOLDER_MIME)
        for in_bytes in (False, True):
            row = file_row(folder, size_in_bytes=in_bytes, tz=timezone.utc)
            self.assertEqual(row[2], "dir")
            self.assertEqual(row[3], "")

    def test_size_in_bytes(self) -> None:
        rec = FileRecord(file_id="F", name="n", mime_type="image/png", size=1500)
        self.assertEqual(file_row(rec, size_in_bytes=True)[3], "1500 B")

    def test_google_doc_type(self) -> None:
        rec = FileRecord(
            file_id="G", name="n", mime_type="application/vnd.google-apps.document"
        )
        self.assertEqual(file_row(rec)[2], "doc")

    def test_name_truncated(self) -> None:
        rec = FileRecord(file_id="F", name="abcdefghijklmnop", mime_type="text/plain")
        self.assertEqual(file_row(rec, name_width=10)[1], "abc...mnop")
        self.assertEqual(file_row(rec, name_width=0)[1], "abcdefghijklmnop")


if __name__ == "__main__":
    unittest.main()
