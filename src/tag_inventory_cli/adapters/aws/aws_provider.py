"""
AWS entry point: credential validation and tagged-resource listing for one region.
"""

import threading
from typing import Optional
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tag_inventory_cli.config import RESOURCES_PER_PAGE
from tag_inventory_cli.core.models import InventoryResult, SkipPolicy
from tag_inventory_cli.adapters.aws.tagging_adapter import collect_inventory


class AWSProvider:
    """
    Main entry point for listing an AWS region.

        provider = AWSProvider(region="us-east-1")
        if not provider.validate_credentials():
            ...
        result = provider.list_resources()
    """

    def __init__(self, region: str, session: Optional[boto3.session.Session] = None):
        self.region = region
        self._session = session or boto3.session.Session(region_name=region)
        self._account_id: Optional[str] = None

    def validate_credentials(self) -> bool:
        """Checks if the user has valid AWS credentials. Never raises."""
        try:
            sts = self._session.client("sts", region_name=self.region)
            identity = sts.get_caller_identity()
            self._account_id = identity["Account"]
            return True
        except (BotoCoreError, ClientError):
            return False

    def get_account_id(self) -> str:
        if not self._account_id:
            self.validate_credentials()
        return self._account_id or "unknown"

    def tagging_client(self):
        return self._session.client("resourcegroupstaggingapi", region_name=self.region)

    def list_resources(
        self,
        policy: SkipPolicy = SkipPolicy.SKIP,
        cancel_event: Optional[threading.Event] = None,
        progress_callback=None,
    ) -> InventoryResult:
        return collect_inventory(
            self.tagging_client(),
            region=self.region,
            policy=policy,
            page_size=RESOURCES_PER_PAGE,
            cancel_event=cancel_event,
            progress_callback=progress_callback,
        )
