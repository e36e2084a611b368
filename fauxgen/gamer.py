"""Random gamer tags."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

GAMER_TAGS = (
    "EatBullets", "PR0_GGRAM3D", "CollateralDamage",
    "TheSickness", "Shoot2Kill", "Overkill", "Killspree", "MindlessKilling",
    "Born2Kill",
    "TheZodiac", "ZodiacKiller", "Osamaisback", "OsamasGhost", "T3rr0r1st",
    "ToySoldier",
    "MilitaryMan", "DeathSquad", "Veteranofdeath", "Angelofdeath", "Ebola",
    "MustardGas",
    "Knuckles", "KnuckleBreaker", "KnuckleDuster", "BloodyKnuckles",
    "JackTheRipper", "TedBundyHandsome",
    "Necromancer", "SmilingSadist", "ManicLaughter", "Tearsofjoy", "ShowMeUrguts",
    "KnifeInGutsOut",
    "Talklesswinmore", "Guillotine", "Decapitator", "TheExecutor", "BigKnives",
    "SharpKnives",
    "LocalBackStabber", "BodyParts", "BodySnatcher", "TheButcher", "meat",
    "ChopChop", "ChopSuey",
    "TheZealot", "VagaBond", "LoneAssailant", "9mm", "SemiAutomatic",
    "101WaysToMeetYourMaker",
    "SayHi2God", "Welcome2Hell", "HellNBack", "Dudemister", "MiseryInducing",
    "SmashDtrash",
    "TakinOutThaTrash", "StreetSweeper", "TheBully", "Getoutofmyway",
    "NoMercy4TheWeak", "Sl4ught3r",
    "HappyKilling", "HappyPurgeDay", "HappyPurging", "RiotStarter", "CantStop",
    "CantStopWontstop",
    "SweetPoison", "SimplyTheBest", "PuppyDrowner", "EatYourHeartOut",
    "RipYourHeartOut", "BloodDrainer",
    "AcidAttack", "AcidFace", "PetrolBomb", "Molotov", "TequilaSunrise",
    "TeKillaSunrise", "LocalGrimReaper",
    "SoulTaker", "DreamHaunter", "Grave", "YSoSerious", "Revenge", "Avenged",
    "BestServedCold", "HitNRUN",
    "Fastandfurious", "MrBlond", "TheKingIsDead", "TheNihilist", "Bad2TheBone",
    "OneShot", "SmokinAces", "DownInSmoke", "NoFun4U",
)


class _Source(Protocol):
    def random_string_element(self, items: Sequence[str]) -> str: ...


class Gamer:
    """Produces random gamer tags."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def tag(self) -> str:
        """Return a gamer tag."""
        return self.faker.random_string_element(GAMER_TAGS)