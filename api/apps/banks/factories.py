"""Factories for generating mock bank data."""

# Third-party imports
import factory

# Application imports
from apps.banks.codes import HEADQUARTERS_SUFFIX
from apps.banks.models import Bank


class BankFactory(factory.django.DjangoModelFactory):
    """Generates mock bank headquarters located in Poland.

    Pass an explicit `code` ending in a suffix other
    than "XXX" to generate a branch instead.
    """

    class Meta:
        model = Bank

    class Params:
        location = factory.Sequence(lambda n: f"{n % 100:02d}")

    code = factory.LazyAttribute(
        lambda obj: f"TEST{obj.country_code}{obj.location}{HEADQUARTERS_SUFFIX}"
    )
    name = factory.Faker("company")
    address = factory.Faker("street_address")
    country_code = "PL"
    country_name = "POLAND"
    is_headquarters = factory.LazyAttribute(
        lambda obj: obj.code.endswith(HEADQUARTERS_SUFFIX)
    )
