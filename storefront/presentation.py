"""Product table shown on staff pages."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd
import streamlit as st

# Backend field -> column header, in display order.
PRODUCT_COLUMNS: Dict[str, str] = {
    "productId": "ID",
    "name": "Name",
    "brand": "Brand",
    "listedPrice": "Listed price",
    "sellingPrice": "Selling price",
    "stock": "Stock",
    "noSold": "Sold",
    "active": "Active",
}


def _brand_name(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("name")
    return value


def _product_row(product: Any) -> Dict[str, Any]:
    if not isinstance(product, Mapping):
        return {"name": str(product)}

    row = {field: product.get(field) for field in PRODUCT_COLUMNS}
    row["brand"] = _brand_name(row["brand"])
    return row


def products_to_frame(products: Sequence[Any]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = [_product_row(p) for p in products]
    df = pd.DataFrame(rows, columns=list(PRODUCT_COLUMNS))
    return df.rename(columns=PRODUCT_COLUMNS)


def render_products(products: Sequence[Any], load_failed: bool = False) -> None:
    if load_failed:
        st.caption("Product list unavailable.")
        return
    if not products:
        st.info("No products to show.")
        return

    st.dataframe(products_to_frame(products), hide_index=True, use_container_width=True)
