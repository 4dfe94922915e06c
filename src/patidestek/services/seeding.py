"""Idempotent demo data used by the seed script and the seed endpoint."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.orm import Session

from patidestek.core.security import hash_password
from patidestek.models import Category, Post, PostStatus, Tag, User, UserRole

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@patidestek.local"

SEED_USERS: list[dict[str, str]] = [
    {"name": "Admin", "email": ADMIN_EMAIL, "password": "Admin123!", "role": "ADMIN"},
    {"name": "Ayşe Yılmaz", "email": "ayse@test.com", "password": "Test123!", "role": "USER"},
    {"name": "Mehmet Kaya", "email": "mehmet@test.com", "password": "Test123!", "role": "USER"},
    {"name": "Zeynep Demir", "email": "zeynep@test.com", "password": "Test123!", "role": "USER"},
    {"name": "Ali Öztürk", "email": "ali@test.com", "password": "Test123!", "role": "USER"},
]

SEED_CATEGORIES = ["Kayıp", "Buldum", "Sahiplendirme", "Yardım"]

SEED_TAGS = [
    "Kedi", "Köpek", "Kuş", "Tavşan", "Diğer",
    "Yavru", "Yaşlı", "Yaralı", "Hasta",
    "Kısır", "Aşılı", "Acil", "Mama", "Tedavi", "Geçici Yuva",
]

SEED_POSTS: list[dict[str, object]] = [
    {
        "title": "Kayıp Kedi - Kadıköy Caferağa",
        "description": (
            "Dün akşam saatlerinde Caferağa civarında kaybolan tekir kedimizi arıyoruz. "
            "2 yaşında, kısırlaştırılmış dişi. Boyunluğu mavi renkli."
        ),
        "image_url": "https://images.unsplash.com/photo-1514888286974-6c03e2ca1dba?w=800",
        "location": ("34", "İstanbul", "1421", "Kadıköy", "Caferağa"),
        "category": "Kayıp",
        "tags": ["Kedi", "Kısır", "Acil"],
        "owner": "ayse@test.com",
    },
    {
        "title": "Sahiplendirmeye Yavru Köpekler",
        "description": (
            "2 aylık, aşıları yapılmış 4 adet yavru köpek sahiplendirmek istiyoruz. "
            "Melez ancak çok sevgi dolu ve sağlıklılar."
        ),
        "image_url": "https://images.unsplash.com/photo-1587300003388-59208cc962cb?w=800",
        "location": ("06", "Ankara", "1231", "Çankaya", "Kızılay"),
        "category": "Sahiplendirme",
        "tags": ["Köpek", "Yavru", "Aşılı"],
        "owner": "mehmet@test.com",
    },
    {
        "title": "Yaralı Kuş Bulundu - Beşiktaş",
        "description": (
            "Ortaköy parkında kanadı kırık bir muhabbet kuşu bulduk. "
            "Şu an evimizde bakıyoruz ama kalıcı olarak bakamayız."
        ),
        "image_url": "https://images.unsplash.com/photo-1552728089-57bdde30beb3?w=800",
        "location": ("34", "İstanbul", "1183", "Beşiktaş", "Ortaköy"),
        "category": "Buldum",
        "tags": ["Kuş", "Yaralı"],
        "owner": "zeynep@test.com",
    },
    {
        "title": "Acil Mama Desteği - Sokak Kedileri",
        "description": (
            "Mahallemizde beslediğimiz 15 sokak kedisi için mama desteğine ihtiyacımız var. "
            "Kış ayları yaklaşıyor."
        ),
        "image_url": "https://images.unsplash.com/photo-1495360010541-f48722b34f7d?w=800",
        "location": ("35", "İzmir", "1203", "Bornova", "Erzene"),
        "category": "Yardım",
        "tags": ["Kedi", "Mama", "Acil"],
        "owner": "ali@test.com",
    },
    {
        "title": "Buldum - Sarı Tekir Kedi Üsküdar",
        "description": (
            "Çengelköy civarında sarı tekir bir kedi bulduk. Çok bakımlı görünüyor, "
            "muhtemelen kayıp. Sahibini arıyoruz."
        ),
        "image_url": "https://images.unsplash.com/photo-1592194996308-7b43878e84a6?w=800",
        "location": ("34", "İstanbul", "1708", "Üsküdar", "Çengelköy"),
        "category": "Buldum",
        "tags": ["Kedi"],
        "owner": "mehmet@test.com",
    },
    {
        "title": "Tedavi Desteği - Kırık Bacaklı Köpek",
        "description": (
            "Sokakta bulduğumuz köpeğin arka bacağı kırık. Ameliyat masrafları için "
            "yardım topluyoruz. Veteriner raporu mevcut."
        ),
        "image_url": "https://images.unsplash.com/photo-1561037404-61cd46aa615b?w=800",
        "location": ("35", "İzmir", "1819", "Konak", "Alsancak"),
        "category": "Yardım",
        "tags": ["Köpek", "Yaralı", "Tedavi", "Acil"],
        "owner": "ayse@test.com",
    },
]


@dataclass
class SeedReport:
    """Names of the records inserted by one seeding run."""

    created: list[str] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)


def _seed_users(db: Session, report: SeedReport) -> dict[str, User]:
    users: dict[str, User] = {}
    for row in SEED_USERS:
        user = db.scalars(select(User).where(User.email == row["email"])).first()
        if user is None:
            user = User(
                name=row["name"],
                email=row["email"],
                password_hash=hash_password(row["password"]),
                role=UserRole(row["role"]),
                is_banned=False,
            )
            db.add(user)
            report.created.append(f"user:{row['email']}")
        else:
            report.existing.append(f"user:{row['email']}")
        users[row["email"]] = user
    return users


def _seed_named(
    db: Session,
    model: type[Category] | type[Tag],
    names: list[str],
    report: SeedReport,
) -> dict[str, Category | Tag]:
    label = model.__tablename__
    records: dict[str, Category | Tag] = {}
    for name in names:
        record = db.scalars(select(model).where(model.name == name)).first()
        if record is None:
            record = model(name=name)
            db.add(record)
            report.created.append(f"{label}:{name}")
        else:
            report.existing.append(f"{label}:{name}")
        records[name] = record
    return records


def seed_database(db: Session) -> SeedReport:
    """Insert the demo accounts, taxonomy and approved listings.

    Records are matched by email, name or title, so running the seed twice
    inserts nothing the second time.
    """
    report = SeedReport()
    users = _seed_users(db, report)
    categories = _seed_named(db, Category, SEED_CATEGORIES, report)
    tags = _seed_named(db, Tag, SEED_TAGS, report)
    db.flush()

    for row in SEED_POSTS:
        title = str(row["title"])
        if db.scalars(select(Post.id).where(Post.title == title)).first() is not None:
            report.existing.append(f"post:{title}")
            continue
        province_code, province_name, district_code, district_name, neighbourhood = row["location"]  # type: ignore[misc]
        post = Post(
            title=title,
            description=str(row["description"]),
            image_url=str(row["image_url"]),
            province_code=province_code,
            province_name=province_name,
            district_code=district_code,
            district_name=district_name,
            neighbourhood_name=neighbourhood,
            status=PostStatus.APPROVED,
            owner=users[str(row["owner"])],
            category=categories[str(row["category"])],
        )
        post.tags = [tags[name] for name in row["tags"]]  # type: ignore[attr-defined]
        db.add(post)
        report.created.append(f"post:{title}")

    db.commit()
    logger.info(
        "Seeding finished: %d created, %d already present",
        len(report.created),
        len(report.existing),
    )
    return report
