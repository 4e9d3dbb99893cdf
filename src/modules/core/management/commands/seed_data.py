from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.accounts.models import Role
from modules.sweets.models import Sweet, SweetCategory

ADMIN_NAME = "Admin"
ADMIN_EMAIL = "admin@sweetbhumi.com"
ADMIN_PASSWORD = "bhumi123"

_IMG = "https://images.unsplash.com/photo-{}?w=400"

CATALOG = [
    ("Milk Chocolate Bar", SweetCategory.CHOCOLATE, "249", 150,
     "Smooth and creamy milk chocolate bar", "1511381939415-e44015466834"),
    ("Dark Chocolate Truffle", SweetCategory.CHOCOLATE, "399", 80,
     "Rich dark chocolate truffle with cocoa dusting", "1548907040-4baa42d10919"),
    ("Gummy Bears", SweetCategory.GUMMY, "149", 200,
     "Colorful fruity gummy bears", "1582058091505-f87a2e55a40f"),
    ("Strawberry Lollipop", SweetCategory.LOLLIPOP, "79", 250,
     "Sweet strawberry flavored lollipop", "1625869016774-3a92be2ae2cd"),
    ("Chocolate Chip Cookies", SweetCategory.COOKIE, "279", 120,
     "Fresh baked chocolate chip cookies", "1499636136210-6f4ee915583e"),
    ("Rainbow Candy Strips", SweetCategory.CANDY, "119", 180,
     "Colorful tangy candy strips", "1581798459219-c8f5e27b7b76"),
    ("Vanilla Cupcake", SweetCategory.CAKE, "199", 90,
     "Moist vanilla cupcake with buttercream frosting", "1576618148400-f54bed99fcfd"),
    ("Sour Gummy Worms", SweetCategory.GUMMY, "179", 160,
     "Tangy sour gummy worms", "1621939514649-280e2ee25f60"),
    ("Peppermint Candy Cane", SweetCategory.CANDY, "59", 300,
     "Classic red and white peppermint candy cane", "1544465544-1b71aee9dfa3"),
    ("White Chocolate Macadamia Cookie", SweetCategory.COOKIE, "319", 100,
     "Premium white chocolate and macadamia nut cookie", "1558961363-fa8fdf82db35"),
    ("Caramel Lollipop", SweetCategory.LOLLIPOP, "99", 220,
     "Creamy caramel swirl lollipop", "1514517521153-1be72277b32f"),
    ("Chocolate Fudge Cake", SweetCategory.CAKE, "479", 50,
     "Decadent triple layer chocolate fudge cake", "1578985545062-69928b1d9587"),
    ("Fruit Jellies", SweetCategory.GUMMY, "199", 140,
     "Assorted fruit flavored jellies", "1587314168485-3236d6710814"),
    ("Mint Chocolate Bar", SweetCategory.CHOCOLATE, "259", 110,
     "Refreshing mint chocolate bar", "1610450949065-1f2841536c88"),
    ("Cotton Candy", SweetCategory.OTHER, "149", 130,
     "Light and fluffy cotton candy", "1563805042-7684c019e1cb"),
    ("Butterscotch Candy", SweetCategory.CANDY, "139", 190,
     "Classic butterscotch hard candy", "1582058091505-be62327df9cf"),
    ("Red Velvet Cake", SweetCategory.CAKE, "519", 45,
     "Classic red velvet cake with cream cheese frosting", "1586985289688-ca3cf47d3e6e"),
    ("Oatmeal Raisin Cookie", SweetCategory.COOKIE, "239", 135,
     "Chewy oatmeal cookie with plump raisins", "1590080876849-b5c82c8555aa"),
    ("Assorted Chocolate Box", SweetCategory.CHOCOLATE, "999", 60,
     "Premium assorted chocolate gift box", "1549007994-cb92caebd54b"),
    ("Bubble Gum Lollipop", SweetCategory.LOLLIPOP, "89", 200,
     "Fun bubble gum flavored lollipop", "1623428187969-5da2dcea5ebf"),
]


class Command(BaseCommand):
    help = "Seed the database with an admin account and the sweets catalogue."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Permanently remove every sweet before seeding.",
        )
        parser.add_argument("--admin-email", default=ADMIN_EMAIL)
        parser.add_argument("--admin-password", default=ADMIN_PASSWORD)

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        if options["reset"]:
            removed, _ = Sweet.objects.all().hard_delete()
            self.stdout.write(f"Removed {removed} existing sweets.")

        admin, admin_created = self._seed_admin(
            options["admin_email"], options["admin_password"]
        )
        sweets_created = self._seed_sweets(admin)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"admin={'created' if admin_created else 'existing'}, "
                f"sweets={sweets_created} new / {len(CATALOG)} total"
            )
        )
        self.stdout.write(f"Admin login: {admin.email}")

    def _seed_admin(self, email: str, password: str):
        User = get_user_model()
        admin = User.objects.filter(email__iexact=email).first()
        if admin:
            if admin.role != Role.ADMIN:
                admin.role = Role.ADMIN
                admin.save(update_fields=["role"])
            return admin, False
        admin = User.objects.create_user(
            email=email,
            password=password,
            name=ADMIN_NAME,
            role=Role.ADMIN,
        )
        return admin, True

    def _seed_sweets(self, admin) -> int:
        self.stdout.write("Creating sweets...")
        created = 0
        for name, category, price, quantity, description, photo in CATALOG:
            if Sweet.objects.alive().filter(name=name).exists():
                continue
            Sweet.objects.create(
                name=name,
                category=category,
                price=Decimal(price),
                quantity=quantity,
                description=description,
                image=_IMG.format(photo),
                created_by=admin,
            )
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating sweets... Done!"))
        return created
