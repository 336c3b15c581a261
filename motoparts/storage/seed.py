"""
Catalog seed data

Loaded once into an empty store at startup (either backend) and by the
db_push script. Products reference categories by slug and are resolved to
ids after the categories are created.
"""
import logging
from typing import Dict

from motoparts.schemas import CategoryCreate, ProductCreate, TestimonialCreate
from motoparts.storage.base import Storage

logger = logging.getLogger(__name__)

CATEGORIES = [
    {
        "name": "Engine & Transmission",
        "slug": "engine-transmission",
        "description": "Essential components for your motorcycle's engine and transmission",
        "image": "/assets/images/categories/engine.avif",
    },
    {
        "name": "Electrical & Electronics",
        "slug": "electrical-electronics",
        "description": "Electrical components and electronics for your motorcycle",
        "image": "/assets/images/categories/electrical.avif",
    },
    {
        "name": "Wheels & Tires",
        "slug": "wheels-tires",
        "description": "Premium wheels and tires for your motorcycle",
        "image": "/assets/images/categories/wheels.avif",
    },
    {
        "name": "Braking System",
        "slug": "braking-system",
        "description": "High-performance brake components for optimal stopping power",
        "image": "/assets/images/categories/brakes.avif",
    },
    {
        "name": "Body & Frame",
        "slug": "body-frame",
        "description": "Body parts and frame components for your motorcycle",
        # No dedicated artwork yet
        "image": "/assets/images/categories/engine.avif",
    },
    {
        "name": "Lighting & Indicators",
        "slug": "lighting-indicators",
        "description": "Lighting systems and indicators for your motorcycle",
        "image": "/assets/images/categories/light.avif",
    },
    {
        "name": "Fuel & Air System",
        "slug": "fuel-air-system",
        "description": "Fuel and air system components for your motorcycle",
        "image": "/assets/images/categories/fuel.avif",
    },
    {
        "name": "Drive System",
        "slug": "drive-system",
        "description": "Drive system components for your motorcycle",
        "image": "/assets/images/categories/drive system.avif",
    },
    {
        "name": "Miscellaneous & Maintenance",
        "slug": "misc-maintenance",
        "description": "Miscellaneous parts and maintenance supplies for your motorcycle",
        "image": "/assets/images/categories/oil.avif",
    },
    {
        "name": "Suspension & Steering",
        "slug": "suspension-steering",
        "description": "Suspension and steering components for your motorcycle",
        "image": "/assets/images/categories/suspension.avif",
    },
]


def _product(name, slug, description, price, image, category, *, original_price=None,
             featured=True, new=False, bestseller=False, rating=0.0, reviews=0):
    return {
        "name": name,
        "slug": slug,
        "description": description,
        "price": price,
        "original_price": original_price,
        "image_url": f"/assets/images/products/{image}",
        "category": category,
        "in_stock": True,
        "is_featured": featured,
        "is_new": new,
        "is_bestseller": bestseller,
        "rating": rating,
        "review_count": reviews,
    }


PRODUCTS = [
    _product("NGK C7HSA Sparkplug", "ngk-c7hsa-sparkplug",
             "Standard spark plug for small motorcycles", 110.0,
             "NGK C7HSA Sparkplug.jpg", "engine-transmission", rating=4.5, reviews=32),
    _product("NGK CPR8EA-9 Spark Plug", "ngk-cpr8ea-9-spark-plug",
             "High-performance plug for enhanced ignition timing", 180.0,
             "Kawasaki Fury CDI.jpg", "engine-transmission", original_price=200.0,
             bestseller=True, rating=4.7, reviews=45),
    _product("NGK CR7E Spark Plug", "ngk-cr7e-spark-plug",
             "Durable spark plug for reliable engine starts", 150.0,
             "Raider 150 Dual Band CDI.jpg", "engine-transmission", rating=4.3, reviews=28),
    _product("Rusi 125cc Piston Kit", "rusi-125cc-piston-kit",
             "OEM replacement piston kit for Rusi 125cc", 320.0,
             "Mio i 125 Piston Kit.jpg", "engine-transmission", new=True, rating=4.6, reviews=19),
    _product("Mio i 125 Piston Kit", "mio-i-125-piston-kit",
             "Quality piston kit for Mio i 125 engine", 400.0,
             "Mio i 125 Piston Kit.jpg", "engine-transmission", original_price=450.0,
             bestseller=True, rating=4.8, reviews=37),
    _product("Raider 150 Piston Kit", "raider-150-piston-kit",
             "High-performance piston for Raider 150", 750.0,
             "Raider 150 Piston Kit.jpg", "engine-transmission", bestseller=True, rating=4.9, reviews=42),
    _product("Barako 175 Piston Kit", "barako-175-piston-kit",
             "Durable piston kit for Barako 175 engine", 600.0,
             "Barako 175 Piston Kit.jpg", "engine-transmission", new=True, rating=4.5, reviews=25),
    _product("Wave 125 Clutch Assembly", "wave-125-clutch-assembly",
             "Complete clutch set for Wave 125", 480.0,
             "Fury 125 Clutch Assy.jpg", "engine-transmission", original_price=520.0,
             rating=4.4, reviews=31),
    _product("Sniper 150 Clutch Set", "sniper-150-clutch-set",
             "Performance clutch kit for Sniper 150", 750.0,
             "Sniper 150 Clutch Set.jpg", "engine-transmission", new=True, bestseller=True,
             rating=4.7, reviews=28),
    _product("Fury 125 Clutch Assy", "fury-125-clutch-assy",
             "Stock replacement clutch for Fury 125", 450.0,
             "Fury 125 Clutch Assy.jpg", "engine-transmission", rating=4.2, reviews=17),
    _product("Rusi CDI Racing Blue Core", "rusi-cdi-racing-blue-core",
             "Racing CDI for enhanced Rusi performance", 350.0,
             "Rusi CDI Racing Blue Core.jpg", "electrical-electronics", original_price=400.0,
             featured=False, new=True, rating=4.6, reviews=23),
    _product("Mio i 125 BRT CDI", "mio-i-125-brt-cdi",
             "BRT CDI upgrade for Mio i 125 tuning", 950.0,
             "Mio i 125 BRT CDI.jpg", "electrical-electronics", original_price=1050.0,
             new=True, bestseller=True, rating=4.8, reviews=34),
    _product("Raider 150 Dual Band CDI", "raider-150-dual-band-cdi",
             "Dual-band CDI for Raider 150 mods", 1200.0,
             "Raider 150 Dual Band CDI.jpg", "electrical-electronics", bestseller=True,
             rating=4.9, reviews=41),
    _product("Kawasaki Fury CDI", "kawasaki-fury-cdi",
             "OEM CDI for Kawasaki Fury", 580.0,
             "Kawasaki Fury CDI.jpg", "electrical-electronics", rating=4.4, reviews=19),
    _product("Motolite MF 4L-BS", "motolite-mf-4l-bs",
             "Maintenance-free 4L-BS battery by Motolite", 980.0,
             "Motolite MF 4L-BS.jpg", "electrical-electronics", bestseller=True, rating=4.7, reviews=52),
]

TESTIMONIALS = [
    {
        "name": "Michael R.",
        "text": "Great quality parts at affordable prices. The NGK spark plugs I ordered worked perfectly in my Honda Wave.",
        "rating": 5,
        "avatar": "https://images.unsplash.com/photo-1557862921-37829c790f19?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=300",
        "bike_model": "Honda Wave 125",
    },
    {
        "name": "Jessica T.",
        "text": "The shipping was fast and the clutch assembly I purchased was exactly what I needed for my Yamaha Sniper.",
        "rating": 4,
        "avatar": "https://images.unsplash.com/photo-1580489944761-15a19d654956?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=300",
        "bike_model": "Yamaha Sniper 150",
    },
    {
        "name": "David L.",
        "text": "I've tried many different CDI units for my Raider 150, but this dual band CDI is by far the best. The performance improvement is noticeable.",
        "rating": 5,
        "avatar": "https://images.unsplash.com/photo-1552058544-f2b08422138a?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=300",
        "bike_model": "Suzuki Raider 150",
    },
    {
        "name": "Anna M.",
        "text": "The piston kit for my Mio was easy to install and runs smoothly. Will definitely shop here again.",
        "rating": 5,
        "avatar": "https://images.unsplash.com/photo-1544005313-94ddf0286df2?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=300",
        "bike_model": "Yamaha Mio i 125",
    },
]


async def seed_storage(storage: Storage) -> Dict[str, int]:
    """
    Load categories, products and testimonials into an empty store.

    Returns the number of records created per entity; a store that already
    has categories is left untouched.
    """
    if not await storage.is_empty():
        logger.info(f"Seed skipped: {storage.backend_name} store already has catalog data")
        return {"categories": 0, "products": 0, "testimonials": 0}

    category_ids = {}
    for data in CATEGORIES:
        category = await storage.create_category(CategoryCreate(**data))
        category_ids[category.slug] = category.id

    for data in PRODUCTS:
        values = dict(data)
        values["category_id"] = category_ids[values.pop("category")]
        await storage.create_product(ProductCreate(**values))

    for data in TESTIMONIALS:
        await storage.create_testimonial(TestimonialCreate(**data))

    stats = {
        "categories": len(CATEGORIES),
        "products": len(PRODUCTS),
        "testimonials": len(TESTIMONIALS),
    }
    logger.info(
        f"Seeded {storage.backend_name} store: {stats['categories']} categories, "
        f"{stats['products']} products, {stats['testimonials']} testimonials"
    )
    return stats
