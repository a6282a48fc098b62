"""
Initial migration for Stock Ledger models.
"""

import django.utils.timezone
from django.db import migrations, models


COUNTERS = [
    'stock_mdp', 'stock_ba', 'stock_gp', 'stock_ros',
    'pending_mdp', 'pending_ba', 'pending_gp', 'pending_ros',
]


class Migration(migrations.Migration):
    """Create StockRecord."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StockRecord',
            fields=[
                ('article_code', models.CharField(max_length=15, primary_key=True, serialize=False, verbose_name='Artículo')),
                ('stock_mdp', models.PositiveIntegerField(default=0, verbose_name='Stock MDP')),
                ('stock_ba', models.PositiveIntegerField(default=0, verbose_name='Stock BA')),
                ('stock_gp', models.PositiveIntegerField(default=0, verbose_name='Stock GP')),
                ('stock_ros', models.PositiveIntegerField(default=0, verbose_name='Stock ROS')),
                ('pending_mdp', models.PositiveIntegerField(default=0, verbose_name='Pendiente MDP')),
                ('pending_ba', models.PositiveIntegerField(default=0, verbose_name='Pendiente BA')),
                ('pending_gp', models.PositiveIntegerField(default=0, verbose_name='Pendiente GP')),
                ('pending_ros', models.PositiveIntegerField(default=0, verbose_name='Pendiente ROS')),
                ('date_created', models.DateTimeField(blank=True, default=django.utils.timezone.now, null=True)),
                ('date_updated', models.DateTimeField(default=django.utils.timezone.now)),
                ('date_updated_ba', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'verbose_name': 'Stock',
                'verbose_name_plural': 'Stock',
                'db_table': 'stock',
                'ordering': ['article_code'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q((f'{name}__gte', 0)),
                        name=f'{name}_non_negative',
                    )
                    for name in COUNTERS
                ],
            },
        ),
    ]
