"""
SQLite contact store backing the demo contacts table.

The sort clause produced by the sort helpers is raw request data, so
list_contacts() only accepts clauses whose column and direction are in
the whitelist below.
"""
import os
import sqlite3
import threading
from typing import Any, Dict, List, Optional, Tuple

from error_handler import log_and_reraise
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)

DEFAULT_DB_PATH = os.getenv('CONTACTS_DB_PATH', ':memory:')


class ContactStore:
    """Manages the SQLite connection and contact queries."""

    # Whitelist of allowed sort columns to prevent SQL injection
    ALLOWED_SORT_COLUMNS = ['id', 'first_name', 'last_name', 'phone', 'address', 'grp']

    CONTACTS_SCHEMA = """
        CREATE TABLE IF NOT EXISTS contacts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            phone TEXT,
            address TEXT,
            grp TEXT DEFAULT 'personal'
        );
        CREATE INDEX IF NOT EXISTS idx_contacts_last_name ON contacts(last_name);
    """

    SEED_CONTACTS = [
        ('Ada', 'Lovelace', '555-0101', '12 St James Square', 'work'),
        ('Alan', 'Turing', '555-0102', '78 High Street', 'work'),
        ('Grace', 'Hopper', '555-0103', '400 Navy Yard', 'work'),
        ('Edsger', 'Dijkstra', '555-0104', '1 Mathematics Lane', 'personal'),
        ('Barbara', 'Liskov', '555-0105', '545 Technology Square', 'personal'),
    ]

    def __init__(self, db_path: str = DEFAULT_DB_PATH, seed: bool = True):
        self.db_path = db_path
        self.lock = threading.Lock()
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._init_schema(seed)

    def _init_schema(self, seed: bool) -> None:
        try:
            with self.lock, self._conn:
                self._conn.executescript(self.CONTACTS_SCHEMA)
                count = self._conn.execute("SELECT COUNT(*) FROM contacts").fetchone()[0]
                if seed and count == 0:
                    self._conn.executemany(
                        "INSERT INTO contacts (first_name, last_name, phone, address, grp) VALUES (?, ?, ?, ?, ?)",
                        self.SEED_CONTACTS
                    )
                    logger.info(f"Seeded {len(self.SEED_CONTACTS)} contacts into {self.db_path}")
        except sqlite3.Error as e:
            log_and_reraise(e, "Failed to initialize contacts database")

    def parse_order_by(self, clause: str) -> Tuple[str, str]:
        """
        Validate a '<column> <direction>' clause against the whitelist.

        Returns:
            (column, 'ASC' | 'DESC')

        Raises:
            ValueError: If the column or direction is not allowed
        """
        parts = clause.split()
        if len(parts) != 2:
            raise ValueError(f"Invalid sort clause: {clause!r}")

        column, direction = parts[0], parts[1].upper()
        if column not in self.ALLOWED_SORT_COLUMNS:
            logger.warning("Invalid sort column detected: '%s' (possible attack attempt)", column)
            raise ValueError(f"Invalid sort column: {column}")
        if direction not in ('ASC', 'DESC'):
            logger.warning("Invalid sort direction detected: '%s' (possible attack attempt)", direction)
            raise ValueError(f"Invalid sort direction: {direction}")
        return column, direction

    def list_contacts(self, order_by: str = 'last_name asc', group: Optional[str] = None,
                      search: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List contacts ordered by a whitelisted sort clause.

        Args:
            order_by: Sort clause, e.g. 'last_name desc'
            group: Only contacts in this group
            search: Case-insensitive substring of first or last name

        Raises:
            ValueError: If order_by is not a whitelisted clause
        """
        column, direction = self.parse_order_by(order_by)

        where_clauses = []
        params: List[Any] = []
        if group:
            where_clauses.append("grp = ?")
            params.append(group)
        if search:
            where_clauses.append("(first_name LIKE ? OR last_name LIKE ?)")
            params.extend([f"%{search}%", f"%{search}%"])

        query = "SELECT id, first_name, last_name, phone, address, grp FROM contacts"
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        # Secondary key keeps ties stable
        query += f" ORDER BY {column} {direction}, id ASC"

        with self.lock:
            cursor = self._conn.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]

    def add_contact(self, first_name: str, last_name: str, phone: str = '',
                    address: str = '', group: str = 'personal') -> int:
        with self.lock, self._conn:
            cursor = self._conn.execute(
                "INSERT INTO contacts (first_name, last_name, phone, address, grp) VALUES (?, ?, ?, ?, ?)",
                (first_name, last_name, phone, address, group)
            )
            return cursor.lastrowid

    def close(self) -> None:
        self._conn.close()


_store: Optional[ContactStore] = None


def get_database() -> ContactStore:
    """Return the process-wide contact store, creating it on first use."""
    global _store
    if _store is None:
        _store = ContactStore()
    return _store
