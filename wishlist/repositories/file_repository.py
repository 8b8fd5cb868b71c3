"""
File-backed wishlist repository for local development and tests.

Each wishlist is one row of a CSV table with the products array serialized
as JSON, mirroring the document layout used in MongoDB:

    id,customerId,products,createdAt,updatedAt
    3f2a...,cust-001,"[{""productId"": ""prod-001"", ""addedAt"": ""...""}]",2024-...,2024-...

Every read-modify-write happens under a file lock so concurrent requests in
one or several processes cannot corrupt the table.
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd
from filelock import FileLock

from wishlist.config import Settings
from wishlist.models.wishlist import Wishlist
from wishlist.repositories.base import WishlistRepository

logger = logging.getLogger(__name__)

COLUMNS = ["id", "customerId", "products", "createdAt", "updatedAt"]


def _row_to_document(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "_id": row.get("id") or None,
        "customerId": row.get("customerId"),
        "products": json.loads(row.get("products") or "[]"),
        "createdAt": row.get("createdAt"),
        "updatedAt": row.get("updatedAt"),
    }


def _document_to_row(wishlist_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
    products = [
        {"productId": p["productId"], "addedAt": p["addedAt"].isoformat()}
        for p in doc["products"]
    ]
    return {
        "id": wishlist_id,
        "customerId": doc["customerId"],
        "products": json.dumps(products, ensure_ascii=False),
        "createdAt": doc["createdAt"].isoformat(),
        "updatedAt": doc["updatedAt"].isoformat(),
    }


class FileWishlistRepository(WishlistRepository):

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # one instance per repository: FileLock is reentrant per instance and thread
        self._lock = FileLock(str(self.path) + ".lock")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileWishlistRepository":
        return cls(Path(settings.DATA_DIR) / settings.WISHLISTS_FILE)

    def _read_df(self) -> pd.DataFrame:
        if not self.path.exists() or self.path.stat().st_size == 0:
            return pd.DataFrame(columns=COLUMNS)
        # keep_default_na=False: ids such as "NA" or "null" are valid customer ids
        return pd.read_csv(self.path, dtype=str, keep_default_na=False)

    def _write_df_nolock(self, df: pd.DataFrame) -> None:
        """Write the table WITHOUT acquiring the lock; the caller must hold it."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(self.path, index=False, columns=COLUMNS)

    def ensure_indexes(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Using file-backed wishlist table at %s", self.path)

    def ping(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Wishlist data directory %s is not usable: %s", self.path.parent, e)
            return False
        return True

    def find_by_customer_id(self, customer_id: str) -> Optional[Wishlist]:
        with self._lock:
            df = self._read_df()
        if df.empty:
            return None
        mask = df["customerId"] == customer_id
        if not mask.any():
            return None
        return Wishlist.from_document(_row_to_document(df[mask].iloc[0].to_dict()))

    def save(self, wishlist: Wishlist) -> Wishlist:
        wishlist.touch()
        with self._lock:
            df = self._read_df()
            mask = df["customerId"] == wishlist.customer_id
            if mask.any():
                wishlist_id = df.loc[mask, "id"].iloc[0]
                df = df[~mask]
            else:
                wishlist_id = uuid.uuid4().hex
            new_row = pd.DataFrame([_document_to_row(wishlist_id, wishlist.to_document())], columns=COLUMNS)
            df = new_row if df.empty else pd.concat([df, new_row], ignore_index=True, sort=False)
            self._write_df_nolock(df)
        wishlist.id = wishlist_id
        return Wishlist.from_document(_row_to_document(new_row.iloc[0].to_dict()))

    def delete_by_customer_id(self, customer_id: str) -> None:
        with self._lock:
            df = self._read_df()
            if df.empty:
                return
            mask = df["customerId"] == customer_id
            if not mask.any():
                return
            self._write_df_nolock(df[~mask])

    def exists_by_customer_id(self, customer_id: str) -> bool:
        with self._lock:
            df = self._read_df()
        return bool((df["customerId"] == customer_id).any()) if not df.empty else False
