# sales/admin.py

from django.contrib import admin

from sales.models import Issue, Sale, SaleLine


# ======================================================
# SALE ADMIN
# ======================================================


class SaleLineInline(admin.TabularInline):
    model = SaleLine
    extra = 0
    can_delete = False
    readonly_fields = ("product", "batch", "qty", "unit_price", "line_total")

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "created_at",
        "created_by",
        "patient",
        "total",
        "payment_method",
        "status",
    )
    readonly_fields = (
        "created_at",
        "created_by",
        "subtotal",
        "discount",
        "tax",
        "total",
        "cash_received",
        "change_due",
        "voided_at",
        "void_reason",
    )
    search_fields = ("=id", "patient", "created_by")
    list_filter = ("status", "payment_method", "created_at")
    inlines = [SaleLineInline]

    def has_delete_permission(self, request, obj=None):
        return False


# ======================================================
# DISPENSE RECORDS
# ======================================================


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("created_at", "product", "batch", "qty", "patient", "sale")
    readonly_fields = ("created_at", "created_by", "product", "batch", "qty", "patient", "sale")
    search_fields = ("patient", "product__name", "batch__lot")
