from ferfam.utils.i18n import normalize_locale, translate, get_translator

def test_normalize_locale():
    assert normalize_locale("am") == "am"
    assert normalize_locale(" EN ") == "en"
    assert normalize_locale("fr") == "en"
    assert normalize_locale(None) == "en"

def test_translate_known_keys():
    assert translate("en", "nav.home") == "Home"
    assert translate("am", "nav.home") == "መነሻ"

def test_translate_falls_back_to_english_then_key():
    # Clé présente seulement dans en.json
    assert translate("am", "admin.logout") == "Log out"
    assert translate("am", "does.not.exist") == "does.not.exist"

def test_translator_formats_params():
    t = get_translator("en")
    assert t("home.price", usd=903, etb=139965) == "Monthly rent: $903 (≈ 139965 ETB)"
