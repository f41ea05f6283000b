"""Management command that walks through the directory operations."""

from django.core.management.base import BaseCommand

from pointsman.directory import CustomerDirectory


class Command(BaseCommand):
    help = "Run the loyalty directory demonstration against a fresh in-memory directory"

    def handle(self, *args, **options):
        directory = CustomerDirectory()

        self._step(1, "Adding customer John Doe (1234567890, john@doe.io)")
        result = directory.create(
            name="John Doe", phone=1234567890, email="john@doe.io", password="password"
        )
        self._report(result)
        if not result.ok:
            return
        customer_id = result.value.id

        self._step(2, "Adding a pre-existing phone number and email (expect two failures)")
        self._report(
            directory.create(
                name="John Doe", phone=1234567890, email="some1@doe.io", password="password"
            )
        )
        self._report(
            directory.create(
                name="John Doe", phone=2345678901, email="john@doe.io", password="password"
            )
        )

        self._step(3, "Getting John Doe by email and by phone number")
        self._report(directory.find(email="john@doe.io"))
        self._report(directory.find(phone=1234567890))

        self._step(4, "Updating name, email, phone number and password")
        directory.update(customer_id, name="Jane Doe")
        directory.update(customer_id, email="jane@doe.io")
        directory.update(customer_id, phone=10987654321)
        directory.update(customer_id, password="newpassword")
        self._report(directory.find(id=customer_id))

        self._step(5, "Adding 100 points")
        self._report(directory.add_points(customer_id, 100))

        self._step(6, "Removing 50 points")
        self._report(directory.remove_points(customer_id, 50))

        self._step(7, "Deleting Jane Doe")
        self._report(directory.delete(customer_id))
        self.stdout.write(f"Existing customers: {directory.list_all()}")

    def _step(self, number: int, title: str):
        self.stdout.write(self.style.MIGRATE_HEADING(f"===== STEP {number} ====="))
        self.stdout.write(title)

    def _report(self, result):
        if not result.ok:
            self.stdout.write(self.style.ERROR(f"Failed: {result.error}"))
            return
        value = result.value
        if hasattr(value, "to_info"):
            value = value.to_info()
        self.stdout.write(self.style.SUCCESS(f"OK: {value}"))
