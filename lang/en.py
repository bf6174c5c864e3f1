"""
English strings for the Marcella Health website
===============================================
"""

STRINGS = {
    # Brand
    "brand_name": "Marcella Health",
    "brand_nav_title": "MARCELLA HEALTH",
    "brand_year": "2025",
    "brand_tagline": "Health Made Accessible",
    "logo_alt": "Marcella Health logo",

    # Navigation
    "nav_introduction": "Introduction",
    "nav_mission": "Our Mission",
    "nav_products": "Our Products",
    "nav_promise": "Our Promise",
    "nav_contact": "Contact",
    "nav_science": "The Science",
    "nav_impact": "Impact",
    "nav_authors": "Authors",
    "nav_open_menu": "Open menu",
    "nav_close_menu": "Close menu",

    # Hero
    "hero_badge": "Trusted. • Tested. • Reliable.",
    "hero_lead": (
        "We provide high-quality generic vitamins, supplements, and OTC medications "
        "so everyone can live healthier, happier lives."
    ),
    "hero_learn_more": "LEARN MORE",

    # Introduction
    "intro_eyebrow": "Introduction",
    "intro_title": "Who We Are",
    "intro_body": (
        "Marcella Health is a generics company dedicated to providing premium vitamins, "
        "supplements, and OTC medications at an affordable price. Our mission is to make "
        "quality healthcare accessible to all by focusing on transparency, safety, and "
        "affordability. We work closely with trusted global manufacturing partners, rigorous "
        "quality controls, and evidence-based formulations to ensure every product meets high "
        "standards for consistency and performance. By combining premium-grade generics with "
        "straightforward pricing and clear product information, we help individuals, "
        "healthcare providers, and partners make confident choices for better everyday health."
    ),

    # Mission
    "mission_eyebrow": "What Drives Us",
    "mission_title": "Our mission",
    "mission_body": (
        "We’re on a mission to deliver high-quality generic vitamins, supplements, and "
        "over-the-counter (OTC) medications all through a convenient online shopping "
        "experience coming soon. Every product we offer meets stringent quality and safety "
        "standards, and our commitment to quality and affordability is unwavering."
    ),

    # Catalog
    "catalog_eyebrow": "Catalog",
    "catalog_title": "Our Products",
    "catalog_lead": "High-quality generic formulations designed for effective relief and daily care.",
    "product_image_alt": "{name} packaging",

    # Quality
    "quality_title": "Excellence in Every Step",

    # Promise
    "promise_eyebrow": "VALUES",
    "promise_title": "Our Promise",

    # Lab / diagrams
    "lab_eyebrow": "Inside the Lab",
    "lab_title": "How We Think About Reliability",
    "grid_title": "Interactive: Surface Code Detection",
    "grid_instructions": (
        "Click the grey <strong>Data Qubits</strong> to inject errors. Watch the colored "
        "<strong>Stabilizers</strong> light up when they detect an odd number of errors."
    ),
    "grid_legend_error": "Error",
    "grid_legend_z": "Z-Check",
    "grid_legend_x": "X-Check",
    "grid_stable": "System is stable.",
    "grid_violations": "Detected {count} parity violations.",
    "grid_point_label": "Toggle error on data point {point}",
    "stages_title": "Marcella Health Architecture",
    "stages_lead": (
        "The model processes syndrome history using a recurrent transformer, attending to "
        "spatial and temporal correlations."
    ),
    "stage_input": "Syndrome",
    "stage_transformer": "Transformer",
    "stage_output": "Correction",
    "metric_title": "Performance vs Standard",
    "metric_lead": (
        "Marcella Health consistently achieves lower logical error rates (LER) than the "
        "standard Minimum-Weight Perfect Matching (MWPM) decoder."
    ),
    "metric_distance": "Distance {distance}",
    "metric_axis": "LOGICAL ERROR RATE (LOWER IS BETTER)",
    "metric_baseline": "Standard",
    "metric_alternative": "Marcella Health",

    # Contact
    "contact_eyebrow": "Get In Touch",
    "contact_title": "Contact Us",
    "contact_lead": "Have questions about our products or partnership opportunities? We're here to help.",
    "field_first_name": "First Name",
    "field_last_name": "Last Name",
    "field_company_name": "Company Name",
    "field_position": "Position",
    "field_message": "Message",
    "placeholder_first_name": "Your First Name",
    "placeholder_last_name": "Your Last Name",
    "placeholder_company_name": "Your Company Name",
    "placeholder_position": "Manager",
    "placeholder_message": "How can we help you?",
    "btn_submit": "Submit Inquiry",
    "btn_sending": "Sending…",
    "contact_error": "Something went wrong. Please try again.",
    "contact_thanks_title": "Thank you for your query.",
    "contact_thanks_body": "It has been sent to our team and somebody will get back to you soon.",

    # Footer
    "footer_tagline": "Health Made Accessible.",
    "footer_email": "info@marcellahealth.com",
    "footer_phone": "Tel: 307-410-3813",
    "footer_address_line1": "1607 Capitol Ave, Suite 511",
    "footer_address_line2": "Cheyenne, Wyoming 82001",
    "footer_copyright": "© {year} Marcella Health. All rights reserved.",
}
