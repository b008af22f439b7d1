"""
Built-in brand logo table.

Maps canonical brand names to remote logo images. Entry order matters:
substring matching walks the table in this order and the first hit wins.
"""

DEFAULT_BRAND_LOGOS = {
    "samsung": "https://1000logos.net/wp-content/uploads/2017/06/Font-Samsung-Logo.jpg",
    "apple": (
        "https://www.freepnglogos.com/uploads/apple-logo-png/"
        "apple-logo-png-index-content-uploads-10.png"
    ),
    "vivo": (
        "https://download.logo.wine/logo/Vivo_(technology_company)/"
        "Vivo_(technology_company)-Logo.wine.png"
    ),
    "oppo": "https://download.logo.wine/logo/Oppo/Oppo-Logo.wine.png",
    "realme": (
        "https://upload.wikimedia.org/wikipedia/commons/thumb/9/91/"
        "Realme_logo.png/1200px-Realme_logo.png"
    ),
    "xiaomi": (
        "https://images.seeklogo.com/logo-png/40/2/"
        "xiaomi-new-2021-logo-png_seeklogo-400999.png"
    ),
    "oneplus": "https://i.pinimg.com/736x/a8/3b/5d/a83b5ddfc044104f35356c1a843e6d36.jpg",
    "nothing": (
        "https://pnghdpro.com/wp-content/themes/pnghdpro/download/"
        "social-media-and-brands/nothing-logo.png"
    ),
    "google": (
        "https://encrypted-tbn0.gstatic.com/images?q=tbn:"
        "ANd9GcRZY2dHbZJIMhXaf2hvCT_o6NAYyAdRBHhpYA&s"
    ),
    "motorola": "https://1000logos.net/wp-content/uploads/2017/04/Emblem-Motorola.jpg",
}
