import json
import unittest

from rich.console import Console

from tag_inventory_cli.core.models import InventoryResult, ResourceRecord, SkippedRecord
from tag_inventory_cli.utils.formatters import (
    format_as_csv,
    format_as_json,
    format_as_table,
    record_row,
)
from tag_inventory_cli.utils.utility import generate_filename


def sample_result() -> InventoryResult:
    return InventoryResult(
        region="us-east-1",
        records=[
            ResourceRecord(region="us-east-1", service="ec2", product="instance",
                           identifier="i-0123abcd", arn="instance/i-0123abcd",
                           tags={"Name": "web"}),
            ResourceRecord(region="us-east-1", service="s3", identifier="my-bucket", arn="my-bucket"),
        ],
        skipped=[SkippedRecord(arn="arn:aws:ec2:us-east-1:1:bad", reason="malformed")],
        pages_fetched=2,
    )


class TestRecordRow(unittest.TestCase):
    def test_missing_product_renders_empty(self):
        record = sample_result().records[1]
        self.assertEqual(record_row(record), ["us-east-1", "s3", "", "my-bucket"])


class TestTableFormatter(unittest.TestCase):
    def test_table_has_expected_columns_and_rows(self):
        table = format_as_table(sample_result().records)

        self.assertEqual([c.header for c in table.columns], ["Region", "Service", "Product", "ID"])
        self.assertEqual(table.row_count, 2)

        console = Console(record=True, width=120)
        console.print(table)
        text = console.export_text()
        self.assertIn("i-0123abcd", text)
        self.assertIn("my-bucket", text)


class TestJsonFormatter(unittest.TestCase):
    def test_json_includes_metadata_records_and_skips(self):
        payload = json.loads(format_as_json(sample_result()))

        self.assertEqual(payload["region"], "us-east-1")
        self.assertEqual(payload["pages_fetched"], 2)
        self.assertFalse(payload["complete"])
        self.assertEqual(payload["resources"][0]["tags"], {"Name": "web"})
        self.assertEqual(payload["resources"][1]["product"], "")
        self.assertEqual(payload["skipped"][0]["reason"], "malformed")


class TestCsvFormatter(unittest.TestCase):
    def test_csv_header_and_rows(self):
        lines = format_as_csv(sample_result().records).splitlines()

        self.assertEqual(lines[0], "Region,Service,Product,ID,ARN")
        self.assertEqual(lines[1], "us-east-1,ec2,instance,i-0123abcd,instance/i-0123abcd")
        self.assertEqual(lines[2], "us-east-1,s3,,my-bucket,my-bucket")


class TestGenerateFilename(unittest.TestCase):
    def test_filename_includes_region_and_extension(self):
        name = generate_filename("JSON", "eu-west-1")
        self.assertTrue(name.startswith("tag_inventory_eu-west-1_"))
        self.assertTrue(name.endswith(".json"))


if __name__ == "__main__":
    unittest.main()
