"""
Table definitions for the relational store.
"""
from sqlalchemy import Column, Integer, MetaData, String, Table

CATEGORY_NAME_MAX_LENGTH = 200

metadata = MetaData()

category_table = Table(
    "category",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(CATEGORY_NAME_MAX_LENGTH), nullable=False),
)
