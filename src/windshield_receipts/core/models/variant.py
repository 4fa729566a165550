from enum import Enum


class ReceiptVariant(str, Enum):
    """Document variant; decides warranty text and whether a signature is asked for."""

    DEALER = "dealer"
    FLEET = "fleet"
    ROCK_CHIP_REPAIR = "rock_chip_repair"
    WINDSHIELD_REPLACEMENT = "windshield_replacement"
    OTHER_GLASS_REPLACEMENT = "other_glass_replacement"

    @property
    def label(self) -> str:
        return VARIANT_LABELS[self]


VARIANT_LABELS = {
    ReceiptVariant.DEALER: "Dealer Invoice",
    ReceiptVariant.FLEET: "Fleet Invoice",
    ReceiptVariant.ROCK_CHIP_REPAIR: "Rock Chip Repair Invoice",
    ReceiptVariant.WINDSHIELD_REPLACEMENT: "Windshield Replacement Invoice",
    ReceiptVariant.OTHER_GLASS_REPLACEMENT: "Glass Replacement Invoice",
}
