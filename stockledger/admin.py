"""
Stock Ledger Admin — read-only view of the counters.

Counters only change through the ledger service (reserve/release),
so the admin never adds, edits or deletes rows.
"""

from django.contrib import admin

from stockledger.models import StockRecord


@admin.register(StockRecord)
class StockRecordAdmin(admin.ModelAdmin):
    """StockRecord admin — read-only."""

    list_display = ['article_code',
                    'stock_mdp', 'stock_ba', 'stock_gp', 'stock_ros',
                    'pending_mdp', 'pending_ba', 'pending_gp', 'pending_ros',
                    'date_updated']
    search_fields = ['article_code']
    date_hierarchy = 'date_updated'
    ordering = ['article_code']

    def get_readonly_fields(self, request, obj=None):
        return [f.name for f in self.model._meta.concrete_fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
