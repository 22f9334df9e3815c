"""
Example 01: Scanning Nullable Columns

This example scans a row with NULL columns straight into a dataclass whose
nullable fields are plain optional types.
"""

import datetime
from dataclasses import dataclass

from nullscan import ConnectionConfig, Engine, attrs, targets


@dataclass
class Customer:
    id: int = 0
    username: str = ""
    phone: str | None = None
    verified_at: datetime.datetime | None = None


def main():
    config = ConnectionConfig(driver="sqlite", database=":memory:")
    engine = Engine.from_config(config)

    # id and username are NOT NULL, phone and verified_at are nullable
    engine.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY NOT NULL,
            username TEXT NOT NULL,
            phone TEXT,
            verified_at DATETIME
        )
    """)
    engine.execute(
        "INSERT INTO users (id, username, phone, verified_at) "
        "VALUES (1, 'johndoe', '123456789', NULL)"
    )

    print("=== Scanning Nullable Columns ===\n")

    cust = Customer()
    engine.scan_one(
        "SELECT id, username, phone, verified_at FROM users WHERE id = :id",
        {"id": 1},
        *targets(*attrs(cust, "id", "username", "phone", "verified_at")),
    )
    print(f"Customer: {cust}\n")

    engine.connection_manager.close_pool()


if __name__ == "__main__":
    main()
