import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "code_type",
                    models.CharField(
                        choices=[("GTIN", "GTIN"), ("National", "National"), ("InternalSku", "Internal SKU")],
                        default="InternalSku",
                        max_length=16,
                    ),
                ),
                ("code_value", models.CharField(max_length=128, unique=True)),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("strength", models.CharField(blank=True, default="", max_length=64)),
                ("form", models.CharField(blank=True, default="", max_length=64)),
                ("pack_size", models.CharField(blank=True, default="", max_length=64)),
                ("uom", models.CharField(blank=True, default="", max_length=32)),
                ("unit_price", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("unit_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Batch",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("lot", models.CharField(help_text="Supplier lot / batch number", max_length=128)),
                ("expiry", models.DateField(blank=True, null=True)),
                ("qty_on_hand", models.IntegerField(default=0)),
                ("unit_cost", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="batches",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "ordering": ["expiry", "id"],
                "indexes": [
                    models.Index(fields=["product", "expiry"], name="batch_product_expiry_idx"),
                    models.Index(fields=["expiry"], name="batch_expiry_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("qty_on_hand__gte", 0)),
                        name="chk_batch_qty_on_hand_gte_zero",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Adjustment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(max_length=150)),
                ("delta", models.IntegerField()),
                ("reason", models.CharField(max_length=255)),
                (
                    "batch",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="adjustments",
                        to="products.batch",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="adjustments",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["product", "created_at"], name="adjustment_product_created_idx"),
                    models.Index(fields=["batch", "created_at"], name="adjustment_batch_created_idx"),
                ],
            },
        ),
    ]
