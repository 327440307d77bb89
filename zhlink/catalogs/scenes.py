# zhlink/catalogs/scenes.py
from __future__ import annotations

from typing import Tuple

from zhlink.core.constants import SceneSchemas as S
from zhlink.models.catalog import SceneDef


def _scene(sid: str, schema: str, p1: str, p2: str, p3: str) -> SceneDef:
    return SceneDef(id=sid, schema=schema, slots=(p1, p2, p3))


SCENES: Tuple[SceneDef, ...] = (
    _scene("zh_scene__study_sleep__v1", S.REASON_OUTCOME_FOLLOWUP, "我没睡够", "我还是把笔记整理完了", "第二天上课更轻松了"),
    _scene("zh_scene__work_wifi__v1", S.REASON_OUTCOME_FOLLOWUP, "网速不稳", "会议一直断线", "我改用手机热点才顺利讲完"),
    _scene("zh_scene__travel_rain__v1", S.REASON_OUTCOME_FOLLOWUP, "下雨了", "我没去远处", "我就在附近的小店慢慢逛"),
    _scene("zh_scene__lab_sample__v1", S.REASON_OUTCOME_FOLLOWUP, "样品太湿", "读数不稳定", "我先烘干再重新测了一次"),
    _scene("zh_scene__daily_no_umbrella__v1", S.REASON_OUTCOME_FOLLOWUP, "我忘带伞", "衣服被淋湿了", "回家后我立刻换了衣服"),
    _scene("zh_scene__tech_update_lag__v1", S.REASON_OUTCOME_FOLLOWUP, "系统更新后卡顿", "我打开应用变慢了", "我清理缓存后顺畅很多"),
    _scene("zh_scene__kitchen_salt__v1", S.REASON_OUTCOME_FOLLOWUP, "我盐放多了", "汤太咸了", "我加了点水才勉强能喝"),
    _scene("zh_scene__bus_traffic__v1", S.REASON_OUTCOME_FOLLOWUP, "路上堵车", "我到得有点晚", "我下次会早点出门"),
    _scene("zh_scene__printer_paper__v1", S.REASON_OUTCOME_FOLLOWUP, "打印机卡纸", "文件没打印出来", "我把纸重新放好再试了一次"),
    _scene("zh_scene__phone_low_battery__v1", S.REASON_OUTCOME_FOLLOWUP, "手机电量太低", "导航一直提醒省电模式", "我找了个地方先充电"),

    _scene("zh_scene__alarm__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不设闹钟", "早上就起不来", "我只好一路小跑赶时间"),
    _scene("zh_scene__backup__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不备份文件", "电脑一出问题就会丢资料", "我现在每周都备份一次"),
    _scene("zh_scene__umbrella__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我出门不带伞", "遇到下雨就会很狼狈", "我开始把伞放在包里"),
    _scene("zh_scene__practice__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不提前练习", "上台就容易紧张", "我后来每天都练十分钟"),
    _scene("zh_scene__sleep_early__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我晚上早点睡", "第二天精神就更好", "我效率也提高了"),
    _scene("zh_scene__save_password__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不保存密码", "每次登录都要重输", "我干脆用密码管理器"),
    _scene("zh_scene__check_weather__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不看天气预报", "行程就容易被打乱", "我现在出门前都会看一眼"),
    _scene("zh_scene__write_plan__v1", S.CONDITION_OUTCOME_FOLLOWUP, "我不列计划", "事情就会越堆越多", "我开始每天写待办清单"),

    _scene("zh_scene__after_class__v1", S.TIME_EVENT_OUTCOME, "我下课了", "我去图书馆复习", "学习效率提高了"),
    _scene("zh_scene__arrive_home__v1", S.TIME_EVENT_OUTCOME, "我到家了", "我先洗个澡", "整个人放松多了"),
    _scene("zh_scene__finish_meeting__v1", S.TIME_EVENT_OUTCOME, "会议结束了", "我把要点整理成文档", "同事更容易跟进"),
    _scene("zh_scene__finish_experiment__v1", S.TIME_EVENT_OUTCOME, "实验做完了", "我马上记录数据", "后面分析更顺利"),
    _scene("zh_scene__lunch_time__v1", S.TIME_EVENT_OUTCOME, "中午到了", "我出去吃点东西", "下午不那么饿了"),
    _scene("zh_scene__weekend_start__v1", S.TIME_EVENT_OUTCOME, "周末开始了", "我把房间收拾了一下", "住起来更舒服了"),
    _scene("zh_scene__project_deadline__v1", S.TIME_EVENT_OUTCOME, "截止日期到了", "我把最后一版提交上去", "我终于松了口气"),
    _scene("zh_scene__rain_stop__v1", S.TIME_EVENT_OUTCOME, "雨停了", "我出去走走", "心情好了一点"),

    _scene("zh_scene__expect_easy_but_hard__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为今天会很顺利", "事情却特别多", "我忙到很晚才结束"),
    _scene("zh_scene__expect_fast_but_slow__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为十分钟就能搞定", "过程却拖了很久", "我后面的安排被迫改了"),
    _scene("zh_scene__expect_quiet_but_noisy__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为咖啡店会很安静", "里面却很吵", "我只好换个地方"),
    _scene("zh_scene__expect_cheaper_but_expensive__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为修理不会太贵", "费用却超出预算", "我只能先做最必要的部分"),
    _scene("zh_scene__expect_ready_but_missing__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为资料都准备好了", "关键文件却找不到", "我只好重新整理一遍"),
    _scene("zh_scene__expect_good_weather_but_rain__v1", S.EXPECTATION_ACTUAL_CONSEQUENCE, "我以为今天不会下雨", "外面却突然变天", "我被淋得有点狼狈"),

    _scene("zh_scene__option_cook_or_takeout__v1", S.OPTION_A_OPTION_B_THEN_RULE, "我可以自己做饭", "我也可以点外卖", "如果我点外卖，就要多等一会儿"),
    _scene("zh_scene__option_walk_or_bus__v1", S.OPTION_A_OPTION_B_THEN_RULE, "我可以走路过去", "我也可以坐公交", "如果我坐公交，就得看发车时间"),
    _scene("zh_scene__option_train_or_taxi__v1", S.OPTION_A_OPTION_B_THEN_RULE, "我可以坐地铁", "我也可以打车", "如果我打车，就会多花一些钱"),
    _scene("zh_scene__option_now_or_later__v1", S.OPTION_A_OPTION_B_THEN_RULE, "我可以现在就开始", "我也可以拖到明天", "如果我拖到明天，就会更赶"),

    _scene("zh_scene__two_facts_tired__v1", S.FACT1_FACT2_INFERENCE, "我昨晚睡得很晚", "今天还要早起", "我整天都很困"),
    _scene("zh_scene__two_facts_busy__v1", S.FACT1_FACT2_INFERENCE, "我这周任务很多", "每天还要开好几场会", "我几乎没有休息时间"),
    _scene("zh_scene__two_facts_save_time__v1", S.FACT1_FACT2_INFERENCE, "我把路线提前查好了", "出门前也准备齐东西", "路上省了不少时间"),
    _scene("zh_scene__two_facts_more_focus__v1", S.FACT1_FACT2_INFERENCE, "我把手机调成静音", "我还关掉了消息提醒", "我更能专心做事"),
    _scene("zh_scene__two_facts_cost__v1", S.FACT1_FACT2_INFERENCE, "我买了不少食材", "还买了很多零食", "这个月开销变大了"),

    _scene("zh_scene__leave_early__v1", S.ACTION_GOAL_EFFECT, "我提前半小时出门", "赶上早班车", "我没有迟到"),
    _scene("zh_scene__write_outline__v1", S.ACTION_GOAL_EFFECT, "我先写了提纲", "讲清楚重点", "汇报更有条理"),
    _scene("zh_scene__dry_sample__v1", S.ACTION_GOAL_EFFECT, "我先把样品烘干", "读数更稳定", "数据更可靠"),
    _scene("zh_scene__clear_cache__v1", S.ACTION_GOAL_EFFECT, "我清理了缓存", "系统运行更顺畅", "应用打开更快"),
    _scene("zh_scene__prepare_questions__v1", S.ACTION_GOAL_EFFECT, "我提前准备了问题清单", "沟通更高效", "会议时间缩短了"),

    _scene("zh_scene__then_now_study__v1", S.TIME_THEN_NOW_CONTRAST, "以前我复习很随意", "我经常记不住重点", "现在我却更有方法了"),
    _scene("zh_scene__then_now_sleep__v1", S.TIME_THEN_NOW_CONTRAST, "以前我总是熬夜", "我白天很没精神", "现在我反而睡得更规律"),
    _scene("zh_scene__then_now_workflow__v1", S.TIME_THEN_NOW_CONTRAST, "刚开始我不太会用这个工具", "我做事很慢", "后来我却越来越熟练"),

    _scene("zh_scene__prepared_but_mistake__v1", S.CONDITION_EXPECTED_SURPRISE, "我提前准备了", "事情本来应该很顺利", "结果却还是出了差错"),
    _scene("zh_scene__leave_early_but_late__v1", S.CONDITION_EXPECTED_SURPRISE, "我出门很早", "我本来应该不会迟到", "路上却偏偏堵得厉害"),
    _scene("zh_scene__practice_but_nervous__v1", S.CONDITION_EXPECTED_SURPRISE, "我练习了很多次", "我本来应该很自信", "上台却还是有点紧张"),
)

# 레벨 3 이상에서만 허용되는 어휘 (레벨 1, 2에서 금지)
LEVEL3_PLUS_TOKENS: Tuple[str, ...] = (
    "预算", "关键", "缓存", "样品", "实验", "汇报", "沟通", "效率", "截止", "省电模式", "热点",
    "发车时间", "提纲", "数据", "分析", "资料", "被迫", "偏偏", "狼狈", "越来越熟练",
)

# 레벨 2 이상에서만 허용되는 어휘 (레벨 1에서 금지)
LEVEL2_PLUS_TOKENS: Tuple[str, ...] = (
    "整理", "路线", "静音", "消息提醒", "待办", "拖到明天", "几乎没有休息时间", "后面的安排",
    "干脆", "省了不少时间", "只好",
)
