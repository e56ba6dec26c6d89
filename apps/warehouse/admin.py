"""
Warehouse admin configuration.
"""
from django.contrib import admin
from .models import Position


@admin.register(Position)
class PositionAdmin(admin.ModelAdmin):
    list_display = ['name', 'level', 'is_occupied']
    list_filter = ['is_occupied', 'level']
    search_fields = ['name']
    readonly_fields = ['is_occupied']
