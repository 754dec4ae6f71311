"""
Streamlit UI for the Pricing Utilities.

Features:
- Price panel (discount, tax, final price, stock badge)
- Shipping estimate under both shipping policies
- Delivery date projection
- Loyalty points by tier
- Text formatting tools (product names, phone numbers, IDs)
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path
from datetime import date, datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pricing_utils.engine import (
    CustomerTier,
    InvalidArgument,
    ShippingPolicy,
    build_price_display,
    calculate_delivery_date,
    calculate_loyalty_points,
    calculate_shipping_cost,
    format_as_price,
    format_date,
    format_phone_number,
    format_product_name,
    generate_order_id,
    generate_product_id,
)
from pricing_utils.config.settings import get_settings
from pricing_utils.config.logger import setup_logger


st.set_page_config(
    page_title="Pricing Utilities",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


settings = get_settings_cached()
logger = setup_logger()


# ============================================================================
# SIDEBAR: Price Inputs
# ============================================================================
with st.sidebar:
    st.header("🏷️ Product Pricing")

    with st.container(border=True):
        original_price = st.number_input("Original Price", value=100.0, step=1.0, format="%.2f")
        discount_percentage = st.number_input("Discount %", value=0.0, step=5.0)
        tax_rate = st.number_input("Tax Rate %", value=0.0, step=0.5)
        quantity = st.number_input("Quantity on Hand", value=1, step=1)
        show_tax = st.checkbox("Show Tax", value=True)

    st.divider()
    st.caption(f"Shipping policy: **{settings.shipping_policy}**")


# ============================================================================
# MAIN CONTENT: TABBED INTERFACE
# ============================================================================
st.title("Pricing Utilities")
st.caption(f"Today is {format_date(datetime.now())}")

tab1, tab2, tab3, tab4, tab5 = st.tabs(
    ["💲 Price", "🚚 Shipping", "📅 Delivery", "⭐ Loyalty", "🔤 Formatting"]
)


# ============================================================================
# TAB 1: PRICE PANEL
# ============================================================================
with tab1:
    try:
        display = build_price_display(
            original_price,
            discount_percentage=discount_percentage,
            tax_rate=tax_rate,
            quantity=quantity,
            show_tax=show_tax,
        )
    except InvalidArgument as e:
        logger.info("Price panel not rendered: %s", e)
        st.error(str(e))
        display = None

    if display:
        with st.container(border=True):
            st.subheader(display.title)
            for line in display.lines:
                if line.emphasis == "primary":
                    st.markdown(f":blue[{line.text}]")
                elif line.emphasis == "secondary":
                    st.markdown(f"#### :violet[{line.text}]")
                else:
                    st.write(line.text)

            badge_color = "green" if display.stock_color == "success" else "red"
            st.markdown(f":{badge_color}[**{display.stock_label}**]")

        with st.expander("🔍 Calculation Details"):
            for step in display.trace:
                if step.value:
                    st.caption(f"**{step.step}**: {step.description} = `{step.value}`")
                else:
                    st.caption(f"**{step.step}**: {step.description}")

            st.dataframe(pd.DataFrame([display.to_dict()]), use_container_width=True, hide_index=True)


# ============================================================================
# TAB 2: SHIPPING ESTIMATE
# ============================================================================
with tab2:
    st.subheader("🚚 Shipping Estimate")

    c1, c2, c3 = st.columns(3)
    with c1:
        weight = st.number_input("Weight", value=2.0, step=0.5)
    with c2:
        distance = st.number_input("Distance", value=100.0, step=10.0)
    with c3:
        st.write("")
        st.write("")
        expedited_shipping = st.checkbox("Expedited", key="expedited_shipping")

    rows = []
    for policy in ShippingPolicy:
        try:
            cost = format_as_price(calculate_shipping_cost(weight, distance, expedited_shipping, policy))
        except InvalidArgument as e:
            cost = f"⚠️ {e}"
        rows.append({
            'Policy': policy.value,
            'Active': policy.value == settings.shipping_policy,
            'Cost': cost,
        })

    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
    st.caption("Lenient: $0.50/lb + $0.001/mi, doubled when expedited, $5.00 minimum. "
               "Strict: $5.00 base + $0.50/kg + $0.10/km.")


# ============================================================================
# TAB 3: DELIVERY DATE
# ============================================================================
with tab3:
    st.subheader("📅 Delivery Date")

    order_date = st.date_input("Order Date", value=date.today())
    expedited_delivery = st.checkbox("Expedited", key="expedited_delivery")

    delivery = calculate_delivery_date(order_date, expedited_delivery)
    m1, m2 = st.columns(2)
    m1.metric("Ordered", format_date(order_date))
    m2.metric("Arrives", format_date(delivery))


# ============================================================================
# TAB 4: LOYALTY POINTS
# ============================================================================
with tab4:
    st.subheader("⭐ Loyalty Points")

    c1, c2 = st.columns(2)
    with c1:
        purchase_amount = st.number_input("Purchase Amount", value=100.0, step=10.0)
    with c2:
        st.write("")
        st.write("")
        first_purchase = st.checkbox("First Purchase")

    points_df = pd.DataFrame([
        {
            'Tier': tier.value.title(),
            'Points': calculate_loyalty_points(purchase_amount, tier, first_purchase),
        }
        for tier in CustomerTier
    ])
    st.dataframe(points_df, use_container_width=True, hide_index=True)


# ============================================================================
# TAB 5: FORMATTING TOOLS
# ============================================================================
with tab5:
    st.subheader("🔤 Formatting Tools")

    with st.container(border=True):
        raw_name = st.text_input("Product Name", placeholder="  apple   iphone  ")
        if raw_name:
            st.code(format_product_name(raw_name) or "(empty)")

    with st.container(border=True):
        raw_phone = st.text_input("Phone Number", placeholder="1-123-456-7890")
        if raw_phone:
            phone = format_phone_number(raw_phone)
            if phone:
                st.code(phone)
            else:
                st.warning("Not a valid US phone number")

    with st.container(border=True):
        c1, c2 = st.columns(2)
        c1.caption("Product ID")
        c1.code(generate_product_id())
        c2.caption("Order ID")
        c2.code(generate_order_id())
        if st.button("🔄 New IDs"):
            st.rerun()
