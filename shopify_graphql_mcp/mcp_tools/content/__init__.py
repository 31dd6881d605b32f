"""
Content tools: pages, navigation, themes, files, metaobjects,
translations, locales and legal policies
"""
