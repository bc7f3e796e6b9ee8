import argparse
import random

from faker import Faker

from app.core.database import SessionLocal
from app.core.exceptions import DuplicateKeyError
from app.models.document_transaction import DOCUMENT_TYPES
from app.services.business_service import create_business
from app.services.database_service import initialize_database
from app.services.document_transaction_service import create_document_transaction

HOME_COMPANY = "TNHH Tư Vấn & Hỗ Trợ Doanh Nghiệp Royal Việt Nam"


def seed_sample_data(db, count: int) -> None:
    fake = Faker("vi_VN")

    print(f"🔄 Creating {count} sample businesses...")
    created = 0
    for _ in range(count):
        try:
            business = create_business(
                db,
                business_data={
                    "name": fake.company(),
                    "tax_id": fake.numerify("##########"),
                    "address": fake.address().replace("\n", ", "),
                    "phone": fake.numerify("09########"),
                    "email": fake.company_email(),
                    "contact_person": fake.name(),
                    "custom_fields": {"source": "seed"},
                },
                account_data={"tax_account_id": fake.user_name()},
            )
        except DuplicateKeyError:
            continue

        create_document_transaction(
            db,
            business.id,
            {
                "document_type": random.choice(DOCUMENT_TYPES),
                "delivery_company": business.name,
                "receiving_company": HOME_COMPANY,
                "delivery_person": business.contact_person,
                "handled_by": "seed",
            },
        )
        created += 1

    print(f"✅ Seeded {created} businesses with one handover each")


def main():
    parser = argparse.ArgumentParser(description="Initialize the business records database.")
    parser.add_argument("--sample", type=int, default=0, help="number of fake businesses to add")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        print("🔄 Initializing database...")
        initialize_database(db)
        print("✅ Tables ready and seed admin present.")

        if args.sample:
            seed_sample_data(db, args.sample)
    finally:
        db.close()


if __name__ == "__main__":
    main()
