"""brand_sass — translate `_brand.yml` brand definitions into Sass bundle layers."""

__version__ = "0.1.0"
