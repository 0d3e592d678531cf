"""
data/seed_products.py
---------------------

Static demo catalog served as-is by the ``GET /products/demo`` route.
These entries use their own flat shape (:class:`SeedProduct`) and are
never merged into the live cache.
"""

from __future__ import annotations

from typing import List

from app.schemas.catalog import SeedProduct

_CDN = "https://res.cloudinary.com/dvwzbhwmx/image/upload"

_SEED = [
    ("Ghost Hydration Sticks", "Polvo con electrolitos - 24 Servicios", 520, "Hidratacion",
     "v1749082722/Ghost_HydrationSticks_LemonCrush_24Serv_ywtxl4.webp",
     "Ghost Hydration Sticks Lemon Crush", "Ghost"),
    ("Insane Psychotic Gold", "Pre entreno - 35 Servicios", 440, "Pre entreno",
     "v1749082721/Insane_PsychoticGold_FruitPunch_35Serv_d6abih.webp",
     "Insane Psychotic Gold Fruit Punch", "Insane Labz"),
    ("Venom Inferno Brazo de 50 Limon", "Pre entreno - 40 Servicios", 510, "Pre entreno",
     "v1749082721/DrgPhr_BrazoDe50Limon_lcqjrk.webp",
     "Venom Inferno Brazo de 50 Limon", "Dragon Pharma"),
    ("Creatina Dragon Pharma", "Creatina - 1 kg", 700, "Creatina",
     "v1749082720/DrgPhr_Creatine1kg_rcvwyg.webp",
     "Dragon Pharma Creatina 1 kg", "Dragon Pharma"),
    ("Proteína Iso Phorm", "Proteina - 5 lbs", 1500, "Proteina",
     "v1749082719/DrgPhr_IsoPhorm_HotChoc_5lbs_sblnox.webp",
     "Dragon Pharma Iso Phorm Hot Chocolate 5 lbs", "Dragon Pharma"),
    ("Dym ISO 100 Whey Protein", "Proteina - 5 lbs", 1600, "Proteina",
     "v1749082719/Dym_ISO100_FudgeBrownie_tqbiri.webp",
     "Dymatize ISO 100 Fudge Brownie 5 lbs", "Dymatize"),
    ("Evogen Amino K.E.M.", "Aminoacidos - 30 Servicios", 680, "Aminoacidos",
     "v1749082718/Evo_AminoKEM_VictoryPunch_bvittx.webp",
     "Evogen Amino K.E.M. Victory Punch", "Evogen"),
    ("Evogen Brain Builder", "Suplemento nootropico - 90 Capsulas", 650, "Nootropicos",
     "v1749082718/Evogen_BrainBuilder_90caps_gf5bvm.webp",
     "Evogen Brain Builder 90 Capsulas", "Evogen"),
    ("Ghost Legend All Out", "Pre entreno - 20 Servicios", 750, "Pre entreno",
     "v1749082718/Ghost_LegendAllOut_CherryLimeade_urxzpt.webp",
     "Ghost Legend All Out Cherry Limeade", "Ghost"),
    ("Ghost Whey Protein", "Proteina whey - 5 lbs", 1370, "Proteina",
     "v1749082718/Ghost_WheyProtein_ChocChipCookie_5lbs_p0bvrx.webp",
     "Ghost Whey Protein Chocolate Chip Cookie 5 lbs", "Ghost"),
    ("Insane Creatina", "Creatina - 300 gr", 350, "Creatina",
     "v1749082717/Insane_Creatine_300gr_tlwz58.webp",
     "Insane Creatina 300 gr", "Insane Labz"),
    ("Evogen Creatina", "Creatina - 300 gr", 430, "Creatina",
     "v1749082717/Evogen_Creatine_300gr_u2pajm.webp",
     "Evogen Creatina 300 gr", "Evogen"),
    ("Farm Fed Whey Protein", "Proteina - 28 Servicios", 750, "Proteina",
     "v1749081112/A_S_FarmFed_ChocolateMilkhake_dquvmm.webp",
     "Farm Fed Whey Protein Chocolate Milkshake", "Axe and Sledge"),
]

SEED_PRODUCTS: List[SeedProduct] = [
    SeedProduct(
        title=title,
        subtitle=subtitle,
        price=price,
        category=category,
        image=f"{_CDN}/{path}",
        image_alt=image_alt,
        brand=brand,
    )
    for title, subtitle, price, category, path, image_alt, brand in _SEED
]


def get_seed_products() -> List[SeedProduct]:
    """Return fresh copies of the demo entries; callers may modify them."""
    return [p.model_copy() for p in SEED_PRODUCTS]
