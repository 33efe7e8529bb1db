from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Bank",
            fields=[
                (
                    "code",
                    models.CharField(
                        db_column="swift_code",
                        max_length=11,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.TextField(db_column="bank_name")),
                ("address", models.TextField(db_column="address")),
                (
                    "country_code",
                    models.CharField(db_column="country_iso2", max_length=2),
                ),
                ("country_name", models.TextField(db_column="country_name")),
                (
                    "is_headquarters",
                    models.BooleanField(db_column="is_headquarter"),
                ),
            ],
            options={
                "db_table": "banks_data",
                "indexes": [
                    models.Index(
                        fields=["country_code"], name="idx_country_iso2"
                    ),
                    models.Index(
                        fields=["code"],
                        name="idx_swift_code_pattern",
                        opclasses=["varchar_pattern_ops"],
                    ),
                ],
            },
        ),
    ]
