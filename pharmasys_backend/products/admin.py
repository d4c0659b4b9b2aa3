# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Admin rules (audit-safe stock):

- Products are editable.
- Batches are read-only here: quantities change only through the
  receive / adjust / checkout / void services so every change is audited.
- Adjustments are append-only and never editable.
"""

from __future__ import annotations

from django.contrib import admin

from products.models import Adjustment, Batch, Product


class BatchInline(admin.TabularInline):
    model = Batch
    extra = 0
    can_delete = False
    fields = ("lot", "expiry", "qty_on_hand", "unit_cost", "created_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "code_type", "code_value", "strength", "form", "unit_price", "created_at")
    list_filter = ("code_type", "form")
    search_fields = ("name", "code_value")
    ordering = ("name",)
    inlines = [BatchInline]


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    list_display = ("product", "lot", "expiry", "qty_on_hand", "unit_cost", "created_at")
    list_filter = ("expiry",)
    search_fields = ("product__name", "product__code_value", "lot")
    list_select_related = ("product",)
    readonly_fields = ("product", "lot", "expiry", "qty_on_hand", "unit_cost", "created_at")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Adjustment)
class AdjustmentAdmin(admin.ModelAdmin):
    list_display = ("created_at", "created_by", "product", "batch", "delta", "reason")
    search_fields = ("product__name", "batch__lot", "created_by", "reason")
    list_select_related = ("product", "batch")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
