# src/tag_inventory_cli/core/arn.py
"""
ARN decomposition.

An ARN has the documented form
    arn:<partition>:<service>:<region>:<account-id>:<resource>
where <resource> may itself contain ':' (e.g. ECS task definitions carry a
":<revision>" suffix). Only the standard "aws" partition is accepted.
"""

from tag_inventory_cli.core.errors import InvalidArnFormat

ARN_PREFIX = "arn:aws:"
MIN_SEGMENTS = 6
RESOURCE_OFFSET = 5  # arn, partition, service, region, account-id


def _segments(arn: str) -> list[str]:
    if not isinstance(arn, str) or not arn:
        raise InvalidArnFormat(str(arn), "empty ARN")

    segments = arn.split(":")
    if len(segments) < MIN_SEGMENTS:
        raise InvalidArnFormat(
            arn, f"expected at least {MIN_SEGMENTS} ':'-separated segments, got {len(segments)}"
        )
    if not arn.startswith(ARN_PREFIX):
        raise InvalidArnFormat(arn, f"must start with '{ARN_PREFIX}'")
    return segments


def service_from_arn(arn: str) -> str:
    """Returns the service identifier, e.g. 'ec2' for 'arn:aws:ec2:...'."""
    return _segments(arn)[2]


def short_arn(arn: str) -> str:
    """
    Drops the partition, service, region and account-id fields, keeping only the
    resource portion. Any ':' inside the resource is turned into '/'.

        arn:aws:ec2:us-east-1:123456789012:instance/i-0123abcd -> instance/i-0123abcd
    """
    return "/".join(_segments(arn)[RESOURCE_OFFSET:])


def decompose_arn(arn: str) -> tuple[str, str]:
    """Returns (service, short_arn) for a full ARN."""
    segments = _segments(arn)
    return segments[2], "/".join(segments[RESOURCE_OFFSET:])
