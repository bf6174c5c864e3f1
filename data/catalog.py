from dataclasses import dataclass

_CDN = "https://cdn.jsdelivr.net/gh/kvanheerden-hash/resources"

LOGO_URL = f"{_CDN}/Marcella%20logo.png"


@dataclass(frozen=True)
class Product:
    key: str
    name: str
    pack_size: str
    active_ingredient: str
    image_url: str


@dataclass(frozen=True)
class ContentBlock:
    key: str
    title: str
    body: str
    icon: str


PRODUCTS = [
    Product(
        key="capsaicin_patch",
        name="Capsaicin Patch",
        pack_size="30 patches",
        active_ingredient="Capsaicin 0.025%",
        image_url=f"{_CDN}/Capsaicin_J_01%20(1).png",
    ),
    Product(
        key="lidocaine_patch",
        name="Lidocaine Patch",
        pack_size="30 patches",
        active_ingredient="Lidocaine 4%",
        image_url=f"{_CDN}/Lidocain_F_03.png",
    ),
    Product(
        key="menthol_patch",
        name="Menthol Patch",
        pack_size="30 patches",
        active_ingredient="Menthol 5%",
        image_url=f"{_CDN}/Menthol_D_01%20(2).png",
    ),
    Product(
        key="methyl_salicylate_cream",
        name="Methyl Salicylate Cream",
        pack_size="120g",
        active_ingredient="Methyl Salicylate 25%",
        image_url=f"{_CDN}/Methyl%20Salicylate_L_01.png",
    ),
]

QUALITY_PILLARS = [
    ContentBlock(
        key="quality",
        title="Commitment to Quality",
        body=(
            "Quality starts with rigorous testing. Every product undergoes multi-level checks "
            "to ensure it meets the highest standards of safety, purity, and effectiveness. "
            "From sourcing raw materials to final packaging, no step is overlooked."
        ),
        icon="shield",
    ),
    ContentBlock(
        key="manufacturing",
        title="Reliable Manufacturing",
        body=(
            "Our products are made in FDA-inspected, cGMP-compliant facilities. These advanced "
            "production environments ensure that every batch is consistent, safe, and effective. "
            "With strict in-process controls, you can trust the quality behind every item we deliver."
        ),
        icon="factory",
    ),
    ContentBlock(
        key="expertise",
        title="Global Expertise",
        body=(
            "We carefully source our ingredients from a trusted network of suppliers around the "
            "world. By working only with ethical and sustainable partners, we guarantee that our "
            "products are not only high-quality but also responsibly made."
        ),
        icon="globe",
    ),
]

PROMISES = [
    ContentBlock(
        key="generics",
        title="Premium Generic Solutions",
        body=(
            "We specialize in offering carefully vetted generic formulations to ensure "
            "affordability without compromising quality."
        ),
        icon="star",
    ),
    ContentBlock(
        key="network",
        title="Global Expertise",
        body="Our worldwide network of manufacturing and sourcing partners ensures consistent excellence.",
        icon="globe",
    ),
    ContentBlock(
        key="vision",
        title="Vision for the Future",
        body=(
            "We plan to bring our trusted generics to all channels that share our mission of "
            "making accessible, quality healthcare a reality for everyone."
        ),
        icon="eye",
    ),
]
