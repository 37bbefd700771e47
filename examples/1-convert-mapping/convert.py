import logging

from suthing import FileHandle

from dbdiff import CatalogSchema, MappingDocument, SchemaConverter

logging.basicConfig(level=logging.DEBUG)

source = MappingDocument.from_dict(FileHandle.load("mapping.yaml"))

converter = SchemaConverter(CatalogSchema(schema_name="public"))
result = converter.convert(source)

if not result.ok:
    raise SystemExit(f"conversion failed: {result.failure.message}")

for table in result.unwrap().tables:
    print(table.name, table.column_names, table.pk_columns)
    for fk in sorted(table.foreign_keys, key=lambda k: (k.name or "", k.key_seq)):
        print(f"  {fk.name}: {fk.fk_column} -> {fk.pk_table}.{fk.pk_column}")
