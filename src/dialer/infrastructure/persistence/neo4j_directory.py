"""Neo4j implementations of the directory, resolver and block-list ports.
Graph: (c:Contact {id, name, starred})-[:HAS_PHONE {position}]->(p:Phone {number, key, nsn, label}).
key is the E.164 or dialable form; nsn the national significant number for loose lookup.
Blocked numbers are standalone (b:BlockedNumber {number}) nodes.
Blocking driver calls made from coroutines run in a worker thread.
"""

import asyncio
from collections.abc import Mapping

from dialer.domain import Contact, PhoneAccount
from dialer.infrastructure.phone import national_key, number_key

_UPDATABLE_FIELDS = frozenset({"name", "starred"})

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT blocked_number_unique IF NOT EXISTS
    FOR (b:BlockedNumber) REQUIRE b.number IS UNIQUE
    """,
)

_CONTACT_WITH_PHONES = """
OPTIONAL MATCH (c)-[r:HAS_PHONE]->(p:Phone)
WITH c, p, r ORDER BY r.position
RETURN c, collect(p) AS phones
ORDER BY c.id
"""


def ensure_directory_constraints(driver) -> None:
    """Create unique constraints on Contact(id) and BlockedNumber(number) if missing."""
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query)


class Neo4jContactDirectory:
    """Stores contacts and their phone numbers in Neo4j."""

    def __init__(self, driver: object, *, default_region: str | None = None) -> None:
        self._driver = driver
        self._default_region = default_region

    def add(self, contact: Contact) -> None:
        """Create or replace a contact together with its phone numbers."""
        phones = [
            {
                "number": n,
                "key": number_key(n, self._default_region) or n,
                "nsn": national_key(n, self._default_region),
                "position": i,
            }
            for i, n in enumerate(contact.phone_numbers)
        ]
        with self._driver.session() as session:
            session.run(
                """
                MERGE (c:Contact {id: $id})
                SET c.name = $name, c.starred = $starred
                WITH c
                OPTIONAL MATCH (c)-[:HAS_PHONE]->(old:Phone)
                DETACH DELETE old
                WITH DISTINCT c
                UNWIND $phones AS phone
                CREATE (c)-[:HAS_PHONE {position: phone.position}]->(:Phone {
                    number: phone.number,
                    key: phone.key,
                    nsn: phone.nsn
                })
                """,
                id=contact.id,
                name=contact.name,
                starred=contact.starred,
                phones=phones,
            )

    async def query(self, contact_id: int) -> list[Contact]:
        return await asyncio.to_thread(
            self._read, "MATCH (c:Contact {id: $id})" + _CONTACT_WITH_PHONES, id=contact_id
        )

    def delete(self, contact_id: int) -> None:
        with self._driver.session() as session:
            session.run(
                """
                MATCH (c:Contact {id: $id})
                OPTIONAL MATCH (c)-[:HAS_PHONE]->(p:Phone)
                DETACH DELETE c, p
                """,
                id=contact_id,
            )

    def update(self, contact_id: int, changes: Mapping[str, object]) -> None:
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update contact fields: {sorted(unknown)}")
        with self._driver.session() as session:
            session.run(
                "MATCH (c:Contact {id: $id}) SET c += $changes",
                id=contact_id,
                changes=dict(changes),
            )

    async def list_all(self) -> list[Contact]:
        return await asyncio.to_thread(self._read, "MATCH (c:Contact)" + _CONTACT_WITH_PHONES)

    async def find_by_number(self, number: str) -> list[Contact]:
        key = number_key(number, self._default_region)
        if key is None:
            return []
        return await asyncio.to_thread(
            self._read,
            """
            MATCH (c:Contact)-[:HAS_PHONE]->(m:Phone)
            WHERE m.key = $key OR ($nsn IS NOT NULL AND m.nsn = $nsn)
            WITH DISTINCT c
            """
            + _CONTACT_WITH_PHONES,
            key=key,
            nsn=national_key(number, self._default_region),
        )

    def _read(self, query: str, **params) -> list[Contact]:
        with self._driver.session() as session:
            result = session.run(query, **params)
            return [_record_to_contact(rec) for rec in result]


class Neo4jPhoneAccountResolver:
    """Resolves phone accounts from the HAS_PHONE edges of a Contact node."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    async def get_contact_accounts(self, contact_id: int) -> list[PhoneAccount] | None:
        return await asyncio.to_thread(self._accounts, contact_id)

    def _accounts(self, contact_id: int) -> list[PhoneAccount] | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                OPTIONAL MATCH (c)-[r:HAS_PHONE]->(p:Phone)
                WITH c, p, r ORDER BY r.position
                RETURN c.id AS contact_id, collect(p) AS phones
                """,
                id=contact_id,
            )
            record = result.single()
        if not record:
            return None
        return [
            PhoneAccount(contact_id=record["contact_id"], number=p["number"], label=p.get("label"))
            for p in record["phones"]
        ]


class Neo4jNumberBlockList:
    """Blocked numbers as BlockedNumber nodes. MERGE keeps block idempotent."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def block(self, number: str) -> None:
        with self._driver.session() as session:
            session.run("MERGE (:BlockedNumber {number: $number})", number=number)

    def unblock(self, number: str) -> None:
        with self._driver.session() as session:
            session.run(
                "MATCH (b:BlockedNumber {number: $number}) DELETE b",
                number=number,
            )

    def is_blocked(self, number: str) -> bool:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (b:BlockedNumber {number: $number})
                RETURN 1 AS blocked
                LIMIT 1
                """,
                number=number,
            )
            return result.single() is not None


def _record_to_contact(record) -> Contact:
    c = record["c"]
    return Contact(
        id=c["id"],
        name=c.get("name") or "",
        starred=bool(c.get("starred")),
        phone_numbers=tuple(p["number"] for p in record["phones"]),
    )
