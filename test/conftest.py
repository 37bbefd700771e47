import logging
from os.path import dirname, realpath
from pathlib import Path

import pytest
import yaml
from suthing import FileHandle

from dbdiff.architecture import CatalogSchema
from dbdiff.mapping import MappingDocument

logger = logging.getLogger(__name__)


@pytest.fixture(scope="function")
def current_path():
    return dirname(realpath(__file__))


@pytest.fixture()
def catalog_schema():
    return CatalogSchema(catalog="shop", schema_name="public")


@pytest.fixture()
def orders_mapping():
    return yaml.safe_load(
        """
        dialect: org.hibernate.dialect.PostgreSQL82Dialect
        tables:
        -   name: ORDERS
            columns:
            -   name: ID
                sql_type_code: -5
                sql_type: int8
                value_type: long
                nullable: true
            -   name: AMOUNT
                sql_type_code: 2
                sql_type: numeric(10, 2)
                value_type: big_decimal
                precision: 10
            -   name: STATUS
                sql_type_code: 12
                sql_type: varchar(20)
                value_type: string
                length: 20
                default_value: "'NEW'"
            -   name: REFERENCE
                sql_type_code: 12
                sql_type: varchar(40)
                value_type: string
                length: 40
                unique: true
            -   name: FLAG
                sql_type_code: 1
                sql_type: char(1)
                value_type: character
                length: 12
            -   name: CUSTOMER_ID
                sql_type_code: -5
                sql_type: int8
                value_type: long
                nullable: false
            primary_key:
                columns:
                -   ID
            foreign_keys:
            -   name: FK_Orders_Customer
                columns:
                -   CUSTOMER_ID
                referenced_table: CUSTOMERS
            indices:
            -   name: IDX_Orders_Status
                columns:
                -   STATUS
                -   AMOUNT
        -   name: CUSTOMERS
            columns:
            -   name: ID
                sql_type_code: -5
                sql_type: int8
                value_type: long
            -   name: NOTES
                sql_type_code: 2005
                sql_type: text
                value_type: text
            primary_key:
                columns:
                -   ID
        """
    )


@pytest.fixture()
def orders_document(orders_mapping):
    return MappingDocument.from_dict(orders_mapping)


@pytest.fixture()
def warehouse_document(current_path):
    return MappingDocument.from_dict(
        FileHandle.load(Path(current_path) / "data/warehouse.yaml")
    )
