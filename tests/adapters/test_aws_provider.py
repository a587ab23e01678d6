import os
import unittest
from unittest import mock

import boto3
from moto import mock_aws

from tag_inventory_cli.adapters.aws.aws_provider import AWSProvider

AWS_TEST_ENV = {
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "AWS_SECURITY_TOKEN": "testing",
    "AWS_SESSION_TOKEN": "testing",
    "AWS_DEFAULT_REGION": "us-east-1",
}


@mock.patch.dict(os.environ, AWS_TEST_ENV)
class TestAWSProvider(unittest.TestCase):
    def _run_tagged_instances(self, region: str, count: int) -> list[str]:
        ec2 = boto3.client("ec2", region_name=region)
        image_id = ec2.describe_images()["Images"][0]["ImageId"]
        reservation = ec2.run_instances(
            ImageId=image_id,
            MinCount=count,
            MaxCount=count,
            TagSpecifications=[{
                "ResourceType": "instance",
                "Tags": [{"Key": "Environment", "Value": "test"}],
            }],
        )
        return [i["InstanceId"] for i in reservation["Instances"]]

    def test_validate_credentials_reads_account_id(self):
        with mock_aws():
            provider = AWSProvider(region="us-east-1")

            self.assertTrue(provider.validate_credentials())
            self.assertEqual(provider.get_account_id(), "123456789012")

    def test_lists_tagged_instances_as_ec2_records(self):
        with mock_aws():
            instance_ids = self._run_tagged_instances("us-east-1", 3)

            result = AWSProvider(region="us-east-1").list_resources()

        instances = [r for r in result.records if r.service == "ec2" and r.product == "instance"]
        self.assertEqual(sorted(r.identifier for r in instances), sorted(instance_ids))
        self.assertTrue(result.complete)
        self.assertGreaterEqual(result.pages_fetched, 1)
        for record in instances:
            self.assertEqual(record.region, "us-east-1")
            self.assertEqual(record.tags.get("Environment"), "test")
            self.assertEqual(record.arn, f"instance/{record.identifier}")

    def test_region_without_instances_yields_no_instance_records(self):
        with mock_aws():
            result = AWSProvider(region="eu-west-1").list_resources()

        self.assertEqual([r for r in result.records if r.product == "instance"], [])
        self.assertTrue(result.complete)
        self.assertGreaterEqual(result.pages_fetched, 1)


if __name__ == "__main__":
    unittest.main()
