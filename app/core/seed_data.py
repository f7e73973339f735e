"""Seed projects inserted when the projects table is first found empty.

Order matters: rows are inserted in this sequence.
"""

_SERVICE_BLURB = (
    "We help brands stand out through aweful, elegant visual design. "
    "Our design mainly philosophy."
)

SEED_PROJECTS: tuple[dict[str, str], ...] = (
    {
        "title": "Search Engine Optimization",
        "description": _SERVICE_BLURB,
        "image_url": "https://i.ibb.co.com/Fm7Jft5/john-schnobrich-Fl-Pc9-Voc-J4-unsplash.jpg",
    },
    {
        "title": "Email Marketing",
        "description": _SERVICE_BLURB,
        "image_url": "https://i.ibb.co.com/fY9ttMn/tim-van-der-kuip-CPs2-X8-JYm-S8-unsplash.jpg",
    },
    {
        "title": "Content Marketing",
        "description": _SERVICE_BLURB,
        "image_url": "https://i.ibb.co.com/7tg45JK/charlesdeluvio-Lks7vei-e-Ag-unsplash.jpg",
    },
    {
        "title": "Social Marketing",
        "description": _SERVICE_BLURB,
        "image_url": "https://i.ibb.co.com/KV3VXfg/redd-f-5-U-28ojjgms-unsplash.jpg",
    },
)
