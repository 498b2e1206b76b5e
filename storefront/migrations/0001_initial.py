from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="WishlistItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_id", models.CharField(max_length=255, verbose_name="Course ID")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Added at")),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="wishlist_items",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "verbose_name": "Wishlist Item",
                "verbose_name_plural": "Wishlist Items",
                "ordering": ("created_at", "id"),
                "constraints": [
                    models.UniqueConstraint(fields=("user", "course_id"), name="unique_wishlist_course_per_user"),
                ],
            },
        ),
    ]
