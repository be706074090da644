"""Products page - catalog maintenance."""
import pandas as pd
import streamlit as st

from perfume_logistics.catalog import ProductCatalog, stock_health
from perfume_logistics.models import CATEGORIES, SIZES, ProductDraft, ProductStatus
from perfume_logistics.session import LogisticsSession

st.set_page_config(page_title="Products | Perfume Logistics", page_icon="📦", layout="wide")

st.title("📦 Product Catalog")

session = LogisticsSession.get_instance()
catalog = ProductCatalog(session.state.products)
stats = catalog.stats()

col1, col2, col3, col4, col5 = st.columns(5)

with col1:
    st.metric("Products", stats.total)

with col2:
    st.metric("Active", stats.active)

with col3:
    st.metric("Low Stock", stats.low_stock)

with col4:
    st.metric("Out of Stock", stats.out_of_stock)

with col5:
    st.metric("Inventory Value", f"${stats.total_value:,.2f}")

st.divider()

col1, col2, col3 = st.columns([2, 1, 1])

with col1:
    term = st.text_input("Search name, SKU, brand or supplier")

with col2:
    category = st.selectbox("Category", options=["All", *CATEGORIES])

with col3:
    status = st.selectbox("Status", options=["All", *[s.value for s in ProductStatus]])

products = catalog.search(
    term=term,
    category=None if category == "All" else category,
    status=None if status == "All" else ProductStatus(status),
)

if products:
    df = pd.DataFrame(
        [
            {
                "SKU": p.sku,
                "Name": p.name,
                "Brand": p.brand,
                "Type": f"{p.category} {p.size}",
                "Stock": p.current_stock,
                "Min": p.min_stock,
                "Reorder": p.reorder_point,
                "Price": p.price,
                "Supplier": p.supplier,
                "Status": p.status.value,
                "Health": stock_health(p),
            }
            for p in products
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)
else:
    st.info("No products match the current filters.", icon="📭")

st.divider()

st.subheader("✏️ Add or Edit Product")

options = {"New product": None, **{f"{p.sku} - {p.name}": p.id for p in session.state.products}}
choice = st.selectbox("Product", options=list(options.keys()))
editing_id = options[choice]
current = catalog.get(editing_id) if editing_id else None
base = ProductDraft(**current.model_dump(include=set(ProductDraft.model_fields))) if current else ProductDraft()

with st.form("product_form"):
    col1, col2 = st.columns(2)
    with col1:
        sku = st.text_input("SKU", value=base.sku)
        name = st.text_input("Name", value=base.name)
        brand = st.text_input("Brand", value=base.brand)
        supplier = st.text_input("Supplier", value=base.supplier)
        draft_category = st.selectbox(
            "Concentration",
            options=CATEGORIES,
            index=CATEGORIES.index(base.category) if base.category in CATEGORIES else 0,
        )
        size = st.selectbox("Size", options=SIZES, index=SIZES.index(base.size) if base.size in SIZES else 4)
    with col2:
        current_stock = st.number_input("Current Stock", value=base.current_stock, step=1)
        min_stock = st.number_input("Min Stock", value=base.min_stock, step=1)
        reorder_point = st.number_input("Reorder Point", value=base.reorder_point, step=1)
        price = st.number_input("Price", value=float(base.price), step=1.0, format="%.2f")
        draft_status = st.selectbox(
            "Status",
            options=[s.value for s in ProductStatus],
            index=[s.value for s in ProductStatus].index(base.status.value),
        )

    submitted = st.form_submit_button("💾 Save Product", type="primary")

if submitted:
    draft = ProductDraft(
        sku=sku,
        name=name,
        brand=brand,
        category=draft_category,
        size=size,
        current_stock=int(current_stock),
        min_stock=int(min_stock),
        reorder_point=int(reorder_point),
        price=float(price),
        supplier=supplier,
        status=ProductStatus(draft_status),
    )
    try:
        if editing_id:
            session.edit_product(editing_id, draft)
        else:
            session.add_product(draft)
    except ValueError as e:
        st.error(str(e))
    else:
        st.success(f'Product "{name.strip()}" saved successfully')
        st.rerun()

if editing_id and st.button("🗑️ Delete Product"):
    session.delete_product(editing_id)
    st.rerun()
