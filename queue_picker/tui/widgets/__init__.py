from queue_picker.tui.widgets.queue_status import QueueStatus
from queue_picker.tui.widgets.status_line import WorkingStatusLine


__all__ = ["QueueStatus", "WorkingStatusLine"]
