from datetime import datetime


def generate_filename(fmt: str, region: str) -> str:
    """Generate a timestamped filename like 'tag_inventory_us-east-1_20240723_101500.json'"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"tag_inventory_{region}_{timestamp}.{fmt.lower()}"
