import streamlit as st
import requests
import pandas as pd

from pack_allocator.config import API_BASE_URL, DEFAULT_PACK_SIZES, ORDER_QTY_PARAM, PACK_SIZES_PARAM

# ---- CONFIG ----
st.set_page_config(
    page_title="Pack Allocator",
    page_icon="📦",
    layout="centered"
)

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)


# ---- HELPER FUNCTIONS ----
def check_api_health():
    """Check if API is running"""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.RequestException:
        return False


def request_shipment(order_qty, pack_sizes):
    """Ask the API for a shipment plan"""
    try:
        response = requests.get(
            f"{API_BASE_URL}/ship",
            params={ORDER_QTY_PARAM: order_qty, PACK_SIZES_PARAM: pack_sizes},
            timeout=5
        )
        return response.json(), response.status_code
    except requests.RequestException as e:
        return {"error": str(e)}, 500


def plan_to_frame(data):
    """Turn the API's {size: count} mapping into a table, largest pack first"""
    rows = [
        {"Pack Size": int(size), "Packs": count, "Items": int(size) * count}
        for size, count in data.items()
    ]
    frame = pd.DataFrame(rows, columns=["Pack Size", "Packs", "Items"])
    return frame.sort_values("Pack Size", ascending=False).reset_index(drop=True)


# ---- MAIN APP ----
st.markdown('<div class="main-header">📦 Pack Allocator</div>', unsafe_allow_html=True)
st.markdown('<div class="sub-header">Ship whole packs only, as few items and packs as possible</div>', unsafe_allow_html=True)

if not check_api_health():
    st.error(f"⚠️ Cannot connect to API. Please ensure the backend is running on {API_BASE_URL}")
    st.code("pack-allocator serve", language="bash")
    st.stop()

col1, col2 = st.columns(2)

with col1:
    order_qty = st.text_input("Items ordered", value="12001")

with col2:
    pack_sizes = st.text_input(
        "Pack sizes",
        value=DEFAULT_PACK_SIZES,
        help="Comma-separated list of pack sizes"
    )

if st.button("📦 Calculate Packs", type="primary", use_container_width=True):
    result, status = request_shipment(order_qty, pack_sizes)

    if status == 200:
        frame = plan_to_frame(result.get("data", {}))

        m1, m2, m3 = st.columns(3)
        shipped = int(frame["Items"].sum())
        with m1:
            st.metric("Total Shipped", shipped)
        with m2:
            st.metric("Total Packs", int(frame["Packs"].sum()))
        with m3:
            st.metric("Surplus", shipped - int(order_qty))

        st.dataframe(frame, use_container_width=True, hide_index=True)
    elif status == 400:
        st.warning(f"⚠️ {result.get('error', 'Invalid input')}")
    else:
        st.error(f"❌ Request failed: {result.get('error', 'Unknown error')}")

st.markdown("---")
st.caption("📦 Pack Allocator | Powered by Flask + Streamlit")
