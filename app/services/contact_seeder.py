"""
通讯录自动生成服务
为新注册用户生成一批联系人：部分取自已注册用户，其余为随机姓名与号码
"""
import random
from typing import List, Optional, Set, Tuple

from app.db.store import DirectoryStore
from app.core.config import settings
from app.core.logger import get_logger

logger = get_logger(__name__)

FIRST_NAMES = [
    "Aarav", "Aisha", "Alex", "Amelia", "Ananya", "Ben", "Chloe", "Daniel",
    "Diego", "Emma", "Ethan", "Fatima", "Grace", "Hana", "Isaac", "Ivy",
    "Jack", "Kavya", "Leo", "Lucas", "Maya", "Mia", "Noah", "Olivia",
    "Omar", "Priya", "Rohan", "Sara", "Sofia", "Tom", "Yuki", "Zoe",
]

LAST_NAMES = [
    "Brown", "Chen", "Davis", "Garcia", "Gupta", "Ito", "Johnson", "Khan",
    "Kim", "Lee", "Lopez", "Martin", "Miller", "Nguyen", "Patel", "Rossi",
    "Sharma", "Silva", "Smith", "Taylor", "Wilson", "Wong",
]

# 通讯录里常见的非人名备注
LABELS = ["Plumber", "Dentist", "Delivery", "Landlord", "Office", "Gym", "Taxi"]


class ContactSeeder:

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def random_name(self) -> str:
        if self.rng.random() < 0.1:
            return self.rng.choice(LABELS)
        return f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}"

    def random_phone_number(self) -> str:
        """生成 E.164 格式的北美号码 (+1 NXX NXX XXXX)"""
        area = self.rng.randint(200, 999)
        exchange = self.rng.randint(200, 999)
        line = self.rng.randint(0, 9999)
        return f"+1{area}{exchange}{line:04d}"

    def build_entries(
        self,
        count: int,
        known: List[Tuple[str, str]],
        exclude: Set[str],
    ) -> List[Tuple[str, str]]:
        """
        生成 count 条 (name, phone_number)。
        known 为可选的已注册用户 (name, phone_number)，号码在批次内不重复且不在 exclude 中。
        """
        entries: List[Tuple[str, str]] = []
        used = set(exclude)

        for name, phone in known:
            if len(entries) >= count:
                break
            if phone in used:
                continue
            used.add(phone)
            entries.append((name, phone))

        while len(entries) < count:
            phone = self.random_phone_number()
            if phone in used:
                continue
            used.add(phone)
            entries.append((self.random_name(), phone))

        self.rng.shuffle(entries)
        return entries

    async def seed(self, store: DirectoryStore, user_id: int, own_phone: str) -> int:
        """为用户写入自动生成的联系人，返回条数"""
        count = settings.AUTO_CONTACTS_COUNT
        if count <= 0:
            return 0

        registered_quota = int(count * settings.AUTO_CONTACTS_REGISTERED_RATIO)
        known = []
        if registered_quota > 0:
            users = await store.sample_users(registered_quota, exclude_id=user_id)
            known = [(user.name, user.phone_number) for user in users]

        entries = self.build_entries(count, known, exclude={own_phone})
        created = await store.create_contacts(user_id, entries)
        logger.info(f"Seeded {created} contacts for user {user_id} ({len(known)} from directory)")
        return created


# 全局单例
contact_seeder = ContactSeeder()
