from babel import Locale, UnknownLocaleError


def normalize_locale(locale: str, /):
  """
  Return the canonical `language[-Script][-REGION]` form of a locale identifier.

  Both `-` and `_` separators are accepted; variants are dropped.
  """

  if not isinstance(locale, str):
    raise TypeError(f"Invalid locale: {locale!r}")

  try:
    parsed = Locale.parse(locale.strip().replace("_", "-"), sep="-")
  except (UnknownLocaleError, ValueError):
    raise ValueError(f"Invalid locale: {locale!r}") from None

  return "-".join(part for part in [parsed.language, parsed.script, parsed.territory] if part)
