# zhlink/catalogs/patterns.py
"""
연결 패턴 카탈로그 (관계별)

각 레코드:
  id, level(1~3), kind(PAIR/SINGLE), 템플릿, 표지 라벨,
  강한 표지, 약한 표지, 시드 금지 토큰, 구조 검사식(^ $ 리터럴 .+ 만 사용)

프로세스 시작 시 한 번 만들어지는 불변 튜플이다.
"""
from __future__ import annotations

from typing import Dict, Tuple

from zhlink.core.constants import Relations
from zhlink.models.catalog import PatternDef


def _table(relation: str, *rows: tuple) -> Tuple[PatternDef, ...]:
    return tuple(
        PatternDef(
            id=pid,
            relation=relation,
            level=level,
            kind=kind,
            tpl=tpl,
            markers_zh=markers,
            strong_markers=strong,
            weak_markers=weak,
            seed_banned=banned,
            check_regex=regex,
        )
        for (pid, level, kind, tpl, markers, strong, weak, banned, regex) in rows
    )


PATTERNS_CAUSE = _table(
    Relations.CAUSE,
    ("zh_pat__cause__yinwei_suoyi__pair__l1", 1, "PAIR", "因为{A}，所以{B}", "因为…所以…", ("因为", "所以"), (), ("因为", "所以"), "^因为.+，所以.+$"),
    ("zh_pat__cause__youyu_yinci__pair__l2", 2, "PAIR", "由于{A}，因此{B}", "由于…因此…", ("由于", "因此"), (), ("由于", "因此"), "^由于.+，因此.+$"),
    ("zh_pat__cause__jiran_jiu__pair__l2", 2, "PAIR", "既然{A}，就{B}", "既然…就…", ("既然",), ("就",), ("既然",), "^既然.+，就.+$"),
    ("zh_pat__cause__yinwei_only__single__l1", 1, "SINGLE", "因为{A}，{B}", "因为…", ("因为",), (), ("因为",), "^因为.+，.+$"),
    ("zh_pat__cause__youyu_only__single__l2", 2, "SINGLE", "由于{A}，{B}", "由于…", ("由于",), (), ("由于",), "^由于.+，.+$"),
    ("zh_pat__cause__zhengyinwei__single__l3", 3, "SINGLE", "正因为{A}，{B}", "正因为…", ("正因为",), (), ("正因为",), "^正因为.+，.+$"),
    ("zh_pat__cause__b_shiyinwei_a__single__l2", 2, "SINGLE", "{B}，是因为{A}", "…是因为…", ("是因为",), (), ("是因为",), "^.+，是因为.+$"),
    ("zh_pat__cause__zhisuoyi_shiyinwei__pair__l2", 2, "PAIR", "之所以{B}，是因为{A}", "之所以…是因为…", ("之所以", "是因为"), (), ("之所以", "是因为"), "^之所以.+，是因为.+$"),
    ("zh_pat__cause__yuanyin_zaiyu__single__l3", 3, "SINGLE", "{B}的原因在于{A}", "…的原因在于…", ("原因在于",), (), ("原因在于",), "^.+的原因在于.+$"),
    ("zh_pat__cause__daozhi__single__l2", 2, "SINGLE", "{A}，导致{B}", "导致…", ("导致",), (), ("导致",), "^.+，导致.+$"),
    ("zh_pat__cause__shide__single__l2", 2, "SINGLE", "{A}，使得{B}", "使得…", ("使得",), (), ("使得",), "^.+，使得.+$"),
)

PATTERNS_RESULT = _table(
    Relations.RESULT,
    ("zh_pat__result__suoyi__single__l1", 1, "SINGLE", "{A}，所以{B}", "所以…", ("所以",), (), ("所以",), "^.+，所以.+$"),
    ("zh_pat__result__yinci__single__l1", 1, "SINGLE", "{A}，因此{B}", "因此…", ("因此",), (), ("因此",), "^.+，因此.+$"),
    ("zh_pat__result__yiner__single__l2", 2, "SINGLE", "{A}，因而{B}", "因而…", ("因而",), (), ("因而",), "^.+，因而.+$"),
    ("zh_pat__result__yushi__single__l1", 1, "SINGLE", "{A}，于是{B}", "于是…", ("于是",), (), ("于是",), "^.+，于是.+$"),
    ("zh_pat__result__jieguo__single__l1", 1, "SINGLE", "{A}，结果{B}", "结果…", ("结果",), (), ("结果",), "^.+，结果.+$"),
    ("zh_pat__result__jieguo_shi__single__l2", 2, "SINGLE", "{A}，结果是{B}", "结果是…", ("结果是",), (), ("结果是",), "^.+，结果是.+$"),
    ("zh_pat__result__conger__single__l3", 3, "SINGLE", "{A}，从而{B}", "从而…", ("从而",), (), ("从而",), "^.+，从而.+$"),
    ("zh_pat__result__jin_er__single__l3", 3, "SINGLE", "{A}，进而{B}", "进而…", ("进而",), (), ("进而",), "^.+，进而.+$"),
    ("zh_pat__result__yizhiyu__single__l3", 3, "SINGLE", "{A}，以至于{B}", "以至于…", ("以至于",), (), ("以至于",), "^.+，以至于.+$"),
)

PATTERNS_CONDITION = _table(
    Relations.CONDITION,
    ("zh_pat__cond__ruguo_jiu__pair__l1", 1, "PAIR", "如果{A}，就{B}", "如果…就…", ("如果",), ("就",), ("如果",), "^如果.+，就.+$"),
    ("zh_pat__cond__yaoshi_jiu__pair__l1", 1, "PAIR", "要是{A}，就{B}", "要是…就…", ("要是",), ("就",), ("要是",), "^要是.+，就.+$"),
    ("zh_pat__cond__jiaru_jiu__pair__l2", 2, "PAIR", "假如{A}，就{B}", "假如…就…", ("假如",), ("就",), ("假如",), "^假如.+，就.+$"),
    ("zh_pat__cond__zhiyao_jiu__pair__l1", 1, "PAIR", "只要{A}，就{B}", "只要…就…", ("只要",), ("就",), ("只要",), "^只要.+，就.+$"),
    ("zh_pat__cond__zhiyou_cai__pair__l2", 2, "PAIR", "只有{A}，才{B}", "只有…才…", ("只有",), ("才",), ("只有",), "^只有.+，才.+$"),
    ("zh_pat__cond__chufei_fouze__pair__l2", 2, "PAIR", "除非{A}，否则{B}", "除非…否则…", ("除非", "否则"), (), ("除非", "否则"), "^除非.+，否则.+$"),
    ("zh_pat__cond__a_dehua_b__single__l2", 2, "SINGLE", "{A}的话，{B}", "…的话…", ("的话",), (), ("的话",), "^.+的话，.+$"),
    ("zh_pat__cond__fouze__single__l2", 2, "SINGLE", "{A}，否则{B}", "否则…", ("否则",), (), ("否则",), "^.+，否则.+$"),
    ("zh_pat__cond__qingkuangxia__single__l3", 3, "SINGLE", "在{A}的情况下，{B}", "在…的情况下…", ("情况下",), (), ("情况下",), "^在.+的情况下，.+$"),
)

PATTERNS_CONTRAST = _table(
    Relations.CONTRAST,
    ("zh_pat__contrast__suiran_danshi__pair__l1", 1, "PAIR", "虽然{A}，但是{B}", "虽然…但是…", ("虽然", "但是"), (), ("虽然", "但是"), "^虽然.+，但是.+$"),
    ("zh_pat__contrast__suiran_dan__pair__l2", 2, "PAIR", "虽然{A}，但{B}", "虽然…但…", ("虽然",), ("但",), ("虽然",), "^虽然.+，但.+$"),
    ("zh_pat__contrast__jinguan_dan__pair__l2", 2, "PAIR", "尽管{A}，但{B}", "尽管…但…", ("尽管",), ("但",), ("尽管",), "^尽管.+，但.+$"),
    ("zh_pat__contrast__jinguan_rengran__pair__l3", 3, "PAIR", "尽管{A}，仍然{B}", "尽管…仍然…", ("尽管", "仍然"), (), ("尽管", "仍然"), "^尽管.+，仍然.+$"),
    ("zh_pat__contrast__a_buguo_b__single__l1", 1, "SINGLE", "{A}，不过{B}", "不过…", ("不过",), (), ("不过",), "^.+，不过.+$"),
    ("zh_pat__contrast__a_keshi_b__single__l1", 1, "SINGLE", "{A}，可是{B}", "可是…", ("可是",), (), ("可是",), "^.+，可是.+$"),
    ("zh_pat__contrast__a_ran'er_b__single__l2", 2, "SINGLE", "{A}，然而{B}", "然而…", ("然而",), (), ("然而",), "^.+，然而.+$"),
    ("zh_pat__contrast__a_que_b__single__l2", 2, "SINGLE", "{A}，却{B}", "却…", ("却",), (), ("却",), "^.+，却.+$"),
    ("zh_pat__contrast__a_faner_b__single__l3", 3, "SINGLE", "{A}，反而{B}", "反而…", ("反而",), (), ("反而",), "^.+，反而.+$"),
    ("zh_pat__contrast__biaomianshang_qishi__pair__l3", 3, "PAIR", "表面上{A}，其实{B}", "表面上…其实…", ("表面上", "其实"), (), ("表面上", "其实"), "^表面上.+，其实.+$"),
    ("zh_pat__contrast__yifangmian_lingyifangmian__pair__l3", 3, "PAIR", "一方面{A}，另一方面{B}", "一方面…另一方面…", ("一方面", "另一方面"), (), ("一方面", "另一方面"), "^一方面.+，另一方面.+$"),
)

PATTERNS_TIME = _table(
    Relations.TIME,
    ("zh_pat__time__dang_shi__single__l1", 1, "SINGLE", "当{A}的时候，{B}", "当…的时候…", ("当",), (), ("当",), "^当.+的时候，.+$"),
    ("zh_pat__time__zai_shi__single__l2", 2, "SINGLE", "在{A}的时候，{B}", "在…的时候…", ("在",), (), (), "^在.+的时候，.+$"),
    ("zh_pat__time__a_yihou_b__single__l1", 1, "SINGLE", "{A}以后，{B}", "…以后…", ("以后",), (), ("以后",), "^.+以后，.+$"),
    ("zh_pat__time__a_zhihou_b__single__l1", 1, "SINGLE", "{A}之后，{B}", "…之后…", ("之后",), (), ("之后",), "^.+之后，.+$"),
    ("zh_pat__time__a_zhiqian_b__single__l1", 1, "SINGLE", "{A}之前，{B}", "…之前…", ("之前",), (), ("之前",), "^.+之前，.+$"),
    ("zh_pat__time__cong_kaishi__single__l2", 2, "SINGLE", "从{A}开始，{B}", "从…开始…", ("开始",), (), ("开始",), "^从.+开始，.+$"),
    ("zh_pat__time__zicong_yihou__single__l3", 3, "SINGLE", "自从{A}以后，{B}", "自从…以后…", ("自从", "以后"), (), ("自从", "以后"), "^自从.+以后，.+$"),
    ("zh_pat__time__suizhe__single__l3", 3, "SINGLE", "随着{A}，{B}", "随着…", ("随着",), (), ("随着",), "^随着.+，.+$"),
    ("zh_pat__time__meidang__single__l3", 3, "SINGLE", "每当{A}，{B}", "每当…", ("每当",), (), ("每当",), "^每当.+，.+$"),
)

PATTERNS_PURPOSE = _table(
    Relations.PURPOSE,
    ("zh_pat__purpose__weile__single__l1", 1, "SINGLE", "为了{B}，{A}", "为了…", ("为了",), (), ("为了",), "^为了.+，.+$"),
    ("zh_pat__purpose__a_weile_b__single__l1", 1, "SINGLE", "{A}，为了{B}", "…为了…", ("为了",), (), ("为了",), "^.+，为了.+$"),
    ("zh_pat__purpose__yibian__single__l2", 2, "SINGLE", "{A}，以便{B}", "以便…", ("以便",), (), ("以便",), "^.+，以便.+$"),
    ("zh_pat__purpose__haorang__single__l2", 2, "SINGLE", "{A}，好让{B}", "好让…", ("好让",), (), ("好让",), "^.+，好让.+$"),
    ("zh_pat__purpose__weideshi__single__l2", 2, "SINGLE", "{A}，为的是{B}", "为的是…", ("为的是",), (), ("为的是",), "^.+，为的是.+$"),
    ("zh_pat__purpose__mian_de__single__l3", 3, "SINGLE", "{A}，免得{B}", "免得…", ("免得",), (), ("免得",), "^.+，免得.+$"),
    ("zh_pat__purpose__yimian__single__l3", 3, "SINGLE", "{A}，以免{B}", "以免…", ("以免",), (), ("以免",), "^.+，以免.+$"),
    ("zh_pat__purpose__weib_qijian__single__l3", 3, "SINGLE", "为{B}起见，{A}", "为…起见…", ("起见",), (), ("起见",), "^为.+起见，.+$"),
)

PATTERNS_ADDITION = _table(
    Relations.ADDITION,
    ("zh_pat__add__budan_erqie__pair__l2", 2, "PAIR", "不但{A}，而且{B}", "不但…而且…", ("不但", "而且"), (), ("不但", "而且"), "^不但.+，而且.+$"),
    ("zh_pat__add__buji_hai__pair__l1", 1, "PAIR", "不仅{A}，还{B}", "不仅…还…", ("不仅",), ("还",), ("不仅",), "^不仅.+，还.+$"),
    ("zh_pat__add__a_erqie_b__single__l1", 1, "SINGLE", "{A}，而且{B}", "而且…", ("而且",), (), ("而且",), "^.+，而且.+$"),
    ("zh_pat__add__a_bingqie_b__single__l2", 2, "SINGLE", "{A}，并且{B}", "并且…", ("并且",), (), ("并且",), "^.+，并且.+$"),
    ("zh_pat__add__a_tongshi_b__single__l2", 2, "SINGLE", "{A}，同时{B}", "同时…", ("同时",), (), ("同时",), "^.+，同时.+$"),
    ("zh_pat__add__a_yebing_b__single__l1", 1, "SINGLE", "{A}，也{B}", "也…", (), ("也",), (), "^.+，也.+$"),
    ("zh_pat__add__chule_hai__pair__l3", 3, "PAIR", "除了{A}以外，还{B}", "除了…以外，还…", ("除了",), ("还",), ("除了",), "^除了.+以外，还.+$"),
)

PATTERNS_CHOICE = _table(
    Relations.CHOICE,
    ("zh_pat__choice__yaome_yaome__pair__l1", 1, "PAIR", "要么{A}，要么{B}", "要么…要么…", ("要么",), (), ("要么",), "^要么.+，要么.+$"),
    ("zh_pat__choice__huozhe_huozhe__pair__l2", 2, "PAIR", "或者{A}，或者{B}", "或者…或者…", ("或者",), (), ("或者",), "^或者.+，或者.+$"),
    ("zh_pat__choice__bushi_jiushi__pair__l2", 2, "PAIR", "不是{A}，就是{B}", "不是…就是…", ("不是", "就是"), (), ("不是", "就是"), "^不是.+，就是.+$"),
    ("zh_pat__choice__a_huozhe_b__single__l1", 1, "SINGLE", "{A}，或者{B}", "或者…", ("或者",), (), ("或者",), "^.+，或者.+$"),
    ("zh_pat__choice__yuqi_buru__pair__l3", 3, "PAIR", "与其{A}，不如{B}", "与其…不如…", ("与其", "不如"), (), ("与其", "不如"), "^与其.+，不如.+$"),
    ("zh_pat__choice__ningke_yebu__pair__l3", 3, "PAIR", "宁可{A}，也不{B}", "宁可…也不…", ("宁可",), ("也不",), ("宁可",), "^宁可.+，也不.+$"),
)

PATTERNS_BY_RELATION: Dict[str, Tuple[PatternDef, ...]] = {
    Relations.CAUSE: PATTERNS_CAUSE,
    Relations.RESULT: PATTERNS_RESULT,
    Relations.CONDITION: PATTERNS_CONDITION,
    Relations.CONTRAST: PATTERNS_CONTRAST,
    Relations.TIME: PATTERNS_TIME,
    Relations.PURPOSE: PATTERNS_PURPOSE,
    Relations.ADDITION: PATTERNS_ADDITION,
    Relations.CHOICE: PATTERNS_CHOICE,
}

ALL_PATTERNS: Tuple[PatternDef, ...] = tuple(
    p for rel in Relations.ALL for p in PATTERNS_BY_RELATION[rel]
)


def patterns_for_relation(relation: str) -> Tuple[PatternDef, ...]:
    """관계 코드에 해당하는 패턴들 (모르는 관계는 빈 튜플)"""
    return PATTERNS_BY_RELATION.get(relation, ())
