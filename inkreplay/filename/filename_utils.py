from datetime import datetime
import uuid


def generate_timestamped_filename(prefix="replay", extension=".mp4"):
    """
    Generate filename with format: {prefix}_YYYY-MM-DD_HH-MM-SS_{uuid}.mp4
    Example: replay_2025-12-23_14-30-25_f47ac10b.mp4

    Args:
        prefix (str): Leading part of the name (default: "replay")
        extension (str): File extension to use (default: ".mp4")

    Returns:
        str: Timestamped filename with short UUID
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    unique_id = uuid.uuid4().hex[:8]
    return f"{prefix}_{timestamp}_{unique_id}{extension}"
