"""
Game mechanics endpoints. All public and all in the bulk layout.
"""

from tyria.base import BulkEndpointClient
from tyria.models.mechanics import (
    Legend,
    Mastery,
    Outfit,
    Pet,
    Profession,
    Race,
    Skill,
    Specialization,
    Trait,
)
from tyria.paths import Endpoint


class MasteriesClient(BulkEndpointClient[Mastery, int]):
    index = Endpoint.MASTERIES
    lookup = Endpoint.MASTERIES_BY_ID
    model = Mastery


class OutfitsClient(BulkEndpointClient[Outfit, int]):
    index = Endpoint.OUTFITS
    lookup = Endpoint.OUTFITS_BY_ID
    model = Outfit


class PetsClient(BulkEndpointClient[Pet, int]):
    """Ranger pets."""

    index = Endpoint.PETS
    lookup = Endpoint.PETS_BY_ID
    model = Pet


class ProfessionsClient(BulkEndpointClient[Profession, str]):
    """Professions, keyed by name (e.g. ``"Guardian"``)."""

    index = Endpoint.PROFESSIONS
    lookup = Endpoint.PROFESSIONS_BY_ID
    model = Profession
    id_type = str


class RacesClient(BulkEndpointClient[Race, str]):
    """Playable races, keyed by name (e.g. ``"Asura"``)."""

    index = Endpoint.RACES
    lookup = Endpoint.RACES_BY_ID
    model = Race
    id_type = str


class SpecializationsClient(BulkEndpointClient[Specialization, int]):
    index = Endpoint.SPECIALIZATIONS
    lookup = Endpoint.SPECIALIZATIONS_BY_ID
    model = Specialization


class SkillsClient(BulkEndpointClient[Skill, int]):
    index = Endpoint.SKILLS
    lookup = Endpoint.SKILLS_BY_ID
    model = Skill


class TraitsClient(BulkEndpointClient[Trait, int]):
    index = Endpoint.TRAITS
    lookup = Endpoint.TRAITS_BY_ID
    model = Trait


class LegendsClient(BulkEndpointClient[Legend, str]):
    """Revenant legends, keyed by name (e.g. ``"Legend1"``)."""

    index = Endpoint.LEGENDS
    lookup = Endpoint.LEGENDS_BY_ID
    model = Legend
    id_type = str
