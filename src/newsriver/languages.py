"""ISO 639-1 language codes accepted by the Newsriver ``language:`` filter."""

# Includes the deprecated codes still indexed upstream (in, ji, mo, sh).
LANGUAGE_CODES: frozenset[str] = frozenset(
    """
    ab aa af ak sq am ar an hy as av ae ay az bm ba eu be bn bh bi bs br bg my
    ca ch ce ny zh cv kw co cr hr cs da dv nl dz en eo et ee fo fj fi fr ff gl
    gd gv ka de el kl gn gu ht ha he hz hi ho hu is io ig id in ia ie iu ik ga
    it ja jv kn kr ks kk km ki rw rn ky kv kg ko ku kj lo la lv li ln lt lu lg
    lb mk mg ms ml mt mi mr mh mo mn na nv ng nd ne no nb nn oc oj cu or om os
    pi ps fa pl pt pa qu rm ro ru se sm sg sa sr sh st tn sn ii sd si ss sk sl
    so nr es su sw sv tl ty tg ta tt te th bo ti to ts tr tk tw ug uk ur uz ve
    vi vo wa cy wo fy xh yi ji yo za zu
    """.split()
)


def is_language_code(code: object) -> bool:
    """Return True if ``code`` is a recognised two-letter language code."""
    return isinstance(code, str) and code in LANGUAGE_CODES
