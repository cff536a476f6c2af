import logging
import os
import sqlite3
import uuid
from datetime import datetime, timezone


logger = logging.getLogger(__name__)

DATABASE = os.getenv("QRTOOLS_DB", "qr_history.db")


def connect(db_path=None):
    conn = sqlite3.connect(db_path or DATABASE)
    conn.row_factory = sqlite3.Row
    return conn


def now_text():
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def init_db(db_path=None):
    conn = connect(db_path)
    c = conn.cursor()

    c.execute("""
        CREATE TABLE IF NOT EXISTS qr_history (
            id TEXT PRIMARY KEY,
            text TEXT NOT NULL,
            is_batch_generated INTEGER NOT NULL DEFAULT 0,
            batch_index INTEGER,
            batch_timestamp TEXT,
            create_time TEXT NOT NULL
        )
    """)
    c.execute("CREATE INDEX IF NOT EXISTS idx_qr_history_batch ON qr_history (batch_timestamp)")

    conn.commit()
    conn.close()


def text_exists(cursor, text):
    cursor.execute("SELECT 1 FROM qr_history WHERE text = ? LIMIT 1", (text,))
    return cursor.fetchone() is not None


def insert_row(cursor, text, batch_index, batch_timestamp):
    item_id = uuid.uuid4().hex
    cursor.execute(
        """
        INSERT INTO qr_history
        (id, text, is_batch_generated, batch_index, batch_timestamp, create_time)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            item_id,
            text,
            1 if batch_timestamp else 0,
            batch_index,
            batch_timestamp,
            now_text(),
        ),
    )
    return item_id


def insert_history_item(text, db_path=None):
    """Store a single generated QR code; history is unique by text."""
    conn = connect(db_path)
    c = conn.cursor()
    if text_exists(c, text):
        conn.close()
        return None

    item_id = insert_row(c, text, None, None)
    conn.commit()
    conn.close()
    logger.info("Saved QR history item %s", item_id)
    return item_id


def insert_batch_items(texts, batch_timestamp=None, db_path=None):
    """Store one batch; every item keeps its position in *texts*."""
    batch_timestamp = batch_timestamp or now_text()
    conn = connect(db_path)
    c = conn.cursor()

    inserted = []
    for index, text in enumerate(texts):
        if text_exists(c, text):
            continue
        inserted.append(insert_row(c, text, index, batch_timestamp))

    conn.commit()
    conn.close()
    logger.info("Saved %d of %d batch QR item(s) to history", len(inserted), len(texts))
    return inserted


def get_history(db_path=None):
    conn = connect(db_path)
    c = conn.cursor()
    c.execute(
        """
        SELECT
            id,
            text,
            is_batch_generated,
            batch_index,
            batch_timestamp,
            create_time
        FROM qr_history
        ORDER BY create_time DESC, rowid DESC
        """
    )
    data = [row_to_item(row) for row in c.fetchall()]
    conn.close()
    return data


def get_batch_items(batch_timestamp, db_path=None):
    conn = connect(db_path)
    c = conn.cursor()
    c.execute(
        """
        SELECT
            id,
            text,
            is_batch_generated,
            batch_index,
            batch_timestamp,
            create_time
        FROM qr_history
        WHERE batch_timestamp = ?
        ORDER BY batch_index ASC
        """,
        (batch_timestamp,),
    )
    data = [row_to_item(row) for row in c.fetchall()]
    conn.close()
    return data


def get_batches(db_path=None):
    conn = connect(db_path)
    c = conn.cursor()
    c.execute(
        """
        SELECT batch_timestamp, COUNT(*) AS item_count
        FROM qr_history
        WHERE batch_timestamp IS NOT NULL
        GROUP BY batch_timestamp
        ORDER BY batch_timestamp DESC
        """
    )
    data = [
        {"batch_timestamp": row["batch_timestamp"], "item_count": row["item_count"]}
        for row in c.fetchall()
    ]
    conn.close()
    return data


def delete_history_item(item_id, db_path=None):
    conn = connect(db_path)
    c = conn.cursor()
    c.execute("DELETE FROM qr_history WHERE id = ?", (item_id,))
    deleted = c.rowcount > 0
    conn.commit()
    conn.close()
    if deleted:
        logger.info("Deleted QR history item %s", item_id)
    return deleted


def delete_all_history(db_path=None):
    conn = connect(db_path)
    c = conn.cursor()
    c.execute("DELETE FROM qr_history")
    removed_count = c.rowcount
    conn.commit()
    conn.close()
    logger.info("Deleted all %d QR history item(s)", removed_count)
    return removed_count


def row_to_item(row):
    return {
        "id": row["id"],
        "text": row["text"],
        "is_batch_generated": bool(row["is_batch_generated"]),
        "batch_index": row["batch_index"],
        "batch_timestamp": row["batch_timestamp"],
        "create_time": row["create_time"],
    }
