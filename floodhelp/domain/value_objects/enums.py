"""Domain enums — pure Python, no external dependencies."""

from enum import Enum, IntEnum


class ReportStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESCUED = "rescued"
    CLOSED = "closed"


class UrgencyLevel(IntEnum):
    WARNING = 1  # ยังไม่โดนน้ำ / แจ้งเตือน
    GROUND_FLOOR = 2  # ผู้ใหญ่ทั้งหมด น้ำท่วมชั้นล่าง
    SECOND_FLOOR = 3  # มีเด็กหรือผู้สูงอายุ น้ำถึงชั้นสอง
    VULNERABLE = 4  # เด็กเล็กมาก หรือคนช่วยตัวเองไม่ได้
    CRITICAL = 5  # วิกฤต: น้ำถึงหลังคา ทารก คนเจ็บ


class GeocodeStrategy(str, Enum):
    """Address rewrite strategies, in the order the resolver tries them."""

    EXACT = "exact"
    STRIP_POSTAL_CODE = "strip_postal_code"
    ABBREVIATE = "abbreviate"
    STREET_DISTRICT = "street_district"
    LOCALITY = "locality"
