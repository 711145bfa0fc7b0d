"""Shared text rendering for CLI output."""

from __future__ import annotations

import click

from retail.application.sales_reporter import ProductSales
from retail.application.show_inventory import InventoryLineDTO
from retail.domain.model.product import Product


def show_products(products: list[Product]) -> None:
    click.echo("Product Catalog:")
    if not products:
        click.echo("No products found.")
        return
    for product in products:
        click.echo(str(product))


def show_inventory(lines: list[InventoryLineDTO]) -> None:
    click.echo("Current Inventory:")
    if not lines:
        click.echo("No inventory records found.")
        return
    for line in lines:
        click.echo(
            f"Product ID: {line.product_id}, Name: {line.product_name}, "
            f"Quantity: {line.quantity}"
        )


def show_sales(summary: dict[int, ProductSales]) -> None:
    click.echo("Sales Report:")
    if not summary:
        click.echo("No sales recorded.")
        return
    for product_id in sorted(summary):
        sales = summary[product_id]
        click.echo(
            f"Product ID: {product_id}, Total Sales: {sales.total_sales}, "
            f"Quantity Sold: {sales.quantity_sold}"
        )
