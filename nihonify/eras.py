from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Jidai(str, Enum):
    """Broad historical period an era belongs to."""

    ASUKA = "asuka"
    NARA = "nara"
    HEIAN = "heian"
    KAMAKURA = "kamakura"
    NANBOKUCHOU = "nanbokuchou"
    SENGOKU = "sengoku"
    MUROMACHI = "muromachi"
    AZUCHI_MOMOYAMA = "azuchi_momoyama"
    EDO = "edo"
    MODERN = "modern"


@dataclass(frozen=True)
class Era:
    """A single named era (nengou).

    ``started_at`` is the first Unix second of the era (inclusive) and
    ``ended_at`` the first second after it (exclusive). ``ended_at`` is
    ``None`` only for the current era. Records without ``kanji`` cover the
    periods in which no era name was in use.
    """

    kanji: Optional[str]
    romaji: Optional[str]
    jidai: Jidai
    started_at: int
    ended_at: Optional[int]

    @property
    def is_current(self) -> bool:
        return self.ended_at is None

    def contains(self, unix_epoch: int) -> bool:
        if unix_epoch < self.started_at:
            return False
        return self.ended_at is None or unix_epoch < self.ended_at


# Boundaries are midnight UTC of the proleptic Gregorian date in the comment.
# Dates before 1582 were converted from the Julian calendar.
SORTED_ERAS: Tuple[Era, ...] = (
    Era("大化", "taika", Jidai.ASUKA, -41795654400, -41647996800),  # 0645-07-20
    Era("白雉", "hakuchi", Jidai.ASUKA, -41647996800, -41500425600),  # 0650-03-25
    Era(None, None, Jidai.ASUKA, -41500425600, -40499395200),  # 0654-11-27
    Era("朱鳥", "shuchou", Jidai.ASUKA, -40499395200, -40495248000),  # 0686-08-17
    Era(None, None, Jidai.ASUKA, -40495248000, -40034908800),  # 0686-10-04
    Era("大宝", "taihou", Jidai.ASUKA, -40034908800, -39936412800),  # 0701-05-07
    Era("慶雲", "keiun", Jidai.ASUKA, -39936412800, -39821414400),  # 0704-06-20
    Era("和銅", "wadou", Jidai.ASUKA, -39821414400, -39579926400),  # 0708-02-11
    Era("霊亀", "reiki", Jidai.NARA, -39579926400, -39509683200),  # 0715-10-07
    Era("養老", "yourou", Jidai.NARA, -39509683200, -39314332800),  # 0717-12-28
    Era("神亀", "jinki", Jidai.NARA, -39314332800, -39140755200),  # 0724-03-07
    Era("天平", "tenpyou", Jidai.NARA, -39140755200, -38520057600),  # 0729-09-06
    Era("天平感宝", "tenpyoukanpou", Jidai.NARA, -38520057600, -38510812800),  # 0749-05-08
    Era("天平勝宝", "tenpyoushouhou", Jidai.NARA, -38510812800, -38256796800),  # 0749-08-23
    Era("天平宝字", "tenpyouhouji", Jidai.NARA, -38256796800, -38023084800),  # 0757-09-10
    Era("天平神護", "tenpyoujingo", Jidai.NARA, -38023084800, -37940659200),  # 0765-02-05
    Era("神護景雲", "jingokeiun", Jidai.NARA, -37940659200, -37842508800),  # 0767-09-17
    Era("宝亀", "houki", Jidai.NARA, -37842508800, -37518336000),  # 0770-10-27
    Era("天応", "tenou", Jidai.NARA, -37518336000, -37465804800),  # 0781-02-03
    Era("延暦", "enryaku", Jidai.NARA, -37465804800, -36718272000),  # 0782-10-04
    Era("大同", "daidou", Jidai.HEIAN, -36718272000, -36580464000),  # 0806-06-12
    Era("弘仁", "kounin", Jidai.HEIAN, -36580464000, -36160646400),  # 0810-10-24
    Era("天長", "tenchou", Jidai.HEIAN, -36160646400, -35844508800),  # 0824-02-12
    Era("承和", "jouwa", Jidai.HEIAN, -35844508800, -35389526400),  # 0834-02-18
    Era("嘉祥", "kashou", Jidai.HEIAN, -35389526400, -35298806400),  # 0848-07-20
    Era("仁寿", "ninju", Jidai.HEIAN, -35298806400, -35186400000),  # 0851-06-05
    Era("斉衡", "saikou", Jidai.HEIAN, -35186400000, -35115724800),  # 0854-12-27
    Era("天安", "tennan", Jidai.HEIAN, -35115724800, -35047382400),  # 0857-03-24
    Era("貞観", "jougan", Jidai.HEIAN, -35047382400, -34478265600),  # 0859-05-24
    Era("元慶", "gangyou", Jidai.HEIAN, -34478265600, -34232889600),  # 0877-06-05
    Era("仁和", "ninna", Jidai.HEIAN, -34232889600, -34099747200),  # 0885-03-15
    Era("寛平", "kanpyou", Jidai.HEIAN, -34099747200, -33816614400),  # 0889-06-03
    Era("昌泰", "shoutai", Jidai.HEIAN, -33816614400, -33713020800),  # 0898-05-24
    Era("延喜", "engi", Jidai.HEIAN, -33713020800, -33026918400),  # 0901-09-05
    Era("延長", "enchou", Jidai.HEIAN, -33026918400, -32775580800),  # 0923-06-03
    Era("承平", "shouhei", Jidai.HEIAN, -32775580800, -32551459200),  # 0931-05-21
    Era("天慶", "tengyou", Jidai.HEIAN, -32551459200, -32270745600),  # 0938-06-27
    Era("天暦", "tenryaku", Jidai.HEIAN, -32270745600, -31938710400),  # 0947-05-20
    Era("天徳", "tentoku", Jidai.HEIAN, -31938710400, -31835030400),  # 0957-11-26
    Era("応和", "ouwa", Jidai.HEIAN, -31835030400, -31725907200),  # 0961-03-10
    Era("康保", "kouhou", Jidai.HEIAN, -31725907200, -31597948800),  # 0964-08-24
    Era("安和", "anna", Jidai.HEIAN, -31597948800, -31545936000),  # 0968-09-13
    Era("天禄", "tenroku", Jidai.HEIAN, -31545936000, -31428950400),  # 0970-05-08
    Era("天延", "tenen", Jidai.HEIAN, -31428950400, -31347907200),  # 0974-01-21
    Era("貞元", "jougen", Jidai.HEIAN, -31347907200, -31272566400),  # 0976-08-16
    Era("天元", "tengen", Jidai.HEIAN, -31272566400, -31133462400),  # 0979-01-05
    Era("永観", "eikan", Jidai.HEIAN, -31133462400, -31071168000),  # 0983-06-03
    Era("寛和", "kanna", Jidai.HEIAN, -31071168000, -31009305600),  # 0985-05-24
    Era("永延", "eien", Jidai.HEIAN, -31009305600, -30935088000),  # 0987-05-10
    Era("永祚", "eiso", Jidai.HEIAN, -30935088000, -30896899200),  # 0989-09-15
    Era("正暦", "shouryaku", Jidai.HEIAN, -30896899200, -30760387200),  # 0990-12-01
    Era("長徳", "choutoku", Jidai.HEIAN, -30760387200, -30638649600),  # 0995-03-30
    Era("長保", "chouhou", Jidai.HEIAN, -30638649600, -30464553600),  # 0999-02-06
    Era("寛弘", "kankou", Jidai.HEIAN, -30464553600, -30196195200),  # 1004-08-14
    Era("長和", "chouwa", Jidai.HEIAN, -30196195200, -30061152000),  # 1013-02-14
    Era("寛仁", "kannin", Jidai.HEIAN, -30061152000, -29940537600),  # 1017-05-27
    Era("治安", "jian", Jidai.HEIAN, -29940537600, -29832451200),  # 1021-03-23
    Era("万寿", "manju", Jidai.HEIAN, -29832451200, -29706307200),  # 1024-08-25
    Era("長元", "chougen", Jidai.HEIAN, -29706307200, -29431036800),  # 1028-08-24
    Era("長暦", "chouryaku", Jidai.HEIAN, -29431036800, -29317248000),  # 1037-05-15
    Era("長久", "choukyuu", Jidai.HEIAN, -29317248000, -29191017600),  # 1040-12-22
    Era("寛徳", "kantoku", Jidai.HEIAN, -29191017600, -29145916800),  # 1044-12-22
    Era("永承", "eishou", Jidai.HEIAN, -29145916800, -28934409600),  # 1046-05-28
    Era("天喜", "tengi", Jidai.HEIAN, -28934409600, -28756857600),  # 1053-02-08
    Era("康平", "kouhei", Jidai.HEIAN, -28756857600, -28537228800),  # 1058-09-25
    Era("治暦", "jiryaku", Jidai.HEIAN, -28537228800, -28421452800),  # 1065-09-10
    Era("延久", "enkyuu", Jidai.HEIAN, -28421452800, -28252195200),  # 1069-05-12
    Era("承保", "jouhou", Jidai.HEIAN, -28252195200, -28150588800),  # 1074-09-22
    Era("承暦", "jouryaku", Jidai.HEIAN, -28150588800, -28046649600),  # 1077-12-11
    Era("永保", "eihou", Jidai.HEIAN, -28046649600, -27952560000),  # 1081-03-28
    Era("応徳", "outoku", Jidai.HEIAN, -27952560000, -27853027200),  # 1084-03-21
    Era("寛治", "kanji", Jidai.HEIAN, -27853027200, -27609897600),  # 1087-05-17
    Era("嘉保", "kahou", Jidai.HEIAN, -27609897600, -27548467200),  # 1095-01-29
    Era("永長", "eichou", Jidai.HEIAN, -27548467200, -27517536000),  # 1097-01-09
    Era("承徳", "joutoku", Jidai.HEIAN, -27517536000, -27463363200),  # 1098-01-02
    Era("康和", "kouwa", Jidai.HEIAN, -27463363200, -27322012800),  # 1099-09-21
    Era("長治", "chouji", Jidai.HEIAN, -27322012800, -27253238400),  # 1104-03-15
    Era("嘉承", "kajou", Jidai.HEIAN, -27253238400, -27179798400),  # 1106-05-20
    Era("天仁", "tennin", Jidai.HEIAN, -27179798400, -27120182400),  # 1108-09-16
    Era("天永", "tenei", Jidai.HEIAN, -27120182400, -27023328000),  # 1110-08-07
    Era("永久", "eikyuu", Jidai.HEIAN, -27023328000, -26876102400),  # 1113-09-01
    Era("元永", "genei", Jidai.HEIAN, -26876102400, -26811734400),  # 1118-05-02
    Era("保安", "houan", Jidai.HEIAN, -26811734400, -26684726400),  # 1120-05-16
    Era("天治", "tenji", Jidai.HEIAN, -26684726400, -26629603200),  # 1124-05-25
    Era("大治", "daiji", Jidai.HEIAN, -26629603200, -26470713600),  # 1126-02-22
    Era("天承", "tenshou", Jidai.HEIAN, -26470713600, -26421379200),  # 1131-03-07
    Era("長承", "choushou", Jidai.HEIAN, -26421379200, -26335670400),  # 1132-09-28
    Era("保延", "houen", Jidai.HEIAN, -26335670400, -26140752000),  # 1135-06-17
    Era("永治", "eiji", Jidai.HEIAN, -26140752000, -26116128000),  # 1141-08-20
    Era("康治", "kouji", Jidai.HEIAN, -26116128000, -26057980800),  # 1142-06-01
    Era("天養", "tenyou", Jidai.HEIAN, -26057980800, -26014608000),  # 1144-04-04
    Era("久安", "kyuuan", Jidai.HEIAN, -26014608000, -25840771200),  # 1145-08-19
    Era("仁平", "ninpei", Jidai.HEIAN, -25840771200, -25720761600),  # 1151-02-21
    Era("久寿", "kyuuju", Jidai.HEIAN, -25720761600, -25674883200),  # 1154-12-11
    Era("保元", "hougen", Jidai.HEIAN, -25674883200, -25581052800),  # 1156-05-25
    Era("平治", "heiji", Jidai.HEIAN, -25581052800, -25556428800),  # 1159-05-16
    Era("永暦", "eiryaku", Jidai.HEIAN, -25556428800, -25505971200),  # 1160-02-25
    Era("応保", "ouhou", Jidai.HEIAN, -25505971200, -25455254400),  # 1161-10-01
    Era("長寛", "choukan", Jidai.HEIAN, -25455254400, -25385961600),  # 1163-05-11
    Era("永万", "eiman", Jidai.HEIAN, -25385961600, -25348291200),  # 1165-07-21
    Era("仁安", "ninnan", Jidai.HEIAN, -25348291200, -25265692800),  # 1166-09-30
    Era("嘉応", "kaou", Jidai.HEIAN, -25265692800, -25200806400),  # 1169-05-13
    Era("承安", "jouan", Jidai.HEIAN, -25200806400, -25067577600),  # 1171-06-03
    Era("安元", "angen", Jidai.HEIAN, -25067577600, -25003296000),  # 1175-08-23
    Era("治承", "jishou", Jidai.HEIAN, -25003296000, -24877411200),  # 1177-09-05
    Era("養和", "youwa", Jidai.HEIAN, -24877411200, -24850800000),  # 1181-09-01
    Era("寿永", "juei", Jidai.HEIAN, -24850800000, -24790492800),  # 1182-07-06
    Era("元暦", "genryaku", Jidai.HEIAN, -24790492800, -24749884800),  # 1184-06-03
    Era("文治", "bunji", Jidai.KAMAKURA, -24749884800, -24602140800),  # 1185-09-16
    Era("建久", "kenkyuu", Jidai.KAMAKURA, -24602140800, -24317539200),  # 1190-05-23
    Era("正治", "shouji", Jidai.KAMAKURA, -24317539200, -24259996800),  # 1199-05-30
    Era("建仁", "kennin", Jidai.KAMAKURA, -24259996800, -24164956800),  # 1201-03-26
    Era("元久", "genkyuu", Jidai.KAMAKURA, -24164956800, -24095491200),  # 1204-03-30
    Era("建永", "kenei", Jidai.KAMAKURA, -24095491200, -24049785600),  # 1206-06-12
    Era("承元", "jougen", Jidai.KAMAKURA, -24049785600, -23941440000),  # 1207-11-23
    Era("建暦", "kenryaku", Jidai.KAMAKURA, -23941440000, -23854953600),  # 1211-04-30
    Era("建保", "kenpou", Jidai.KAMAKURA, -23854953600, -23686041600),  # 1214-01-25
    Era("承久", "joukyuu", Jidai.KAMAKURA, -23686041600, -23591520000),  # 1219-06-03
    Era("貞応", "jouou", Jidai.KAMAKURA, -23591520000, -23509353600),  # 1222-06-01
    Era("元仁", "gennin", Jidai.KAMAKURA, -23509353600, -23496566400),  # 1225-01-07
    Era("嘉禄", "karoku", Jidai.KAMAKURA, -23496566400, -23413190400),  # 1225-06-04
    Era("安貞", "antei", Jidai.KAMAKURA, -23413190400, -23375347200),  # 1228-01-25
    Era("寛喜", "kanki", Jidai.KAMAKURA, -23375347200, -23278665600),  # 1229-04-07
    Era("貞永", "jouei", Jidai.KAMAKURA, -23278665600, -23244364800),  # 1232-04-30
    Era("天福", "tenpuku", Jidai.KAMAKURA, -23244364800, -23196758400),  # 1233-06-01
    Era("文暦", "bunryaku", Jidai.KAMAKURA, -23196758400, -23167468800),  # 1234-12-04
    Era("嘉禎", "katei", Jidai.KAMAKURA, -23167468800, -23067676800),  # 1235-11-08
    Era("暦仁", "ryakunin", Jidai.KAMAKURA, -23067676800, -23061369600),  # 1239-01-06
    Era("延応", "enou", Jidai.KAMAKURA, -23061369600, -23017219200),  # 1239-03-20
    Era("仁治", "ninji", Jidai.KAMAKURA, -23017219200, -22934707200),  # 1240-08-12
    Era("寛元", "kangen", Jidai.KAMAKURA, -22934707200, -22806921600),  # 1243-03-25
    Era("宝治", "houji", Jidai.KAMAKURA, -22806921600, -22741430400),  # 1247-04-12
    Era("建長", "kenchou", Jidai.KAMAKURA, -22741430400, -22505385600),  # 1249-05-09
    Era("康元", "kougen", Jidai.KAMAKURA, -22505385600, -22491734400),  # 1256-10-31
    Era("正嘉", "shouka", Jidai.KAMAKURA, -22491734400, -22426934400),  # 1257-04-07
    Era("正元", "shougen", Jidai.KAMAKURA, -22426934400, -22392374400),  # 1259-04-27
    Era("文応", "bunou", Jidai.KAMAKURA, -22392374400, -22366281600),  # 1260-05-31
    Era("弘長", "kouchou", Jidai.KAMAKURA, -22366281600, -22271155200),  # 1261-03-29
    Era("文永", "bunei", Jidai.KAMAKURA, -22271155200, -21919248000),  # 1264-04-03
    Era("建治", "kenji", Jidai.KAMAKURA, -21919248000, -21829737600),  # 1275-05-29
    Era("弘安", "kouan", Jidai.KAMAKURA, -21829737600, -21508329600),  # 1278-03-30
    Era("正応", "shouou", Jidai.KAMAKURA, -21508329600, -21341923200),  # 1288-06-05
    Era("永仁", "einin", Jidai.KAMAKURA, -21341923200, -21161606400),  # 1293-09-13
    Era("正安", "shouan", Jidai.KAMAKURA, -21161606400, -21049718400),  # 1299-06-01
    Era("乾元", "kengen", Jidai.KAMAKURA, -21049718400, -21025526400),  # 1302-12-18
    Era("嘉元", "kagen", Jidai.KAMAKURA, -21025526400, -20920118400),  # 1303-09-24
    Era("徳治", "tokuji", Jidai.KAMAKURA, -20920118400, -20861884800),  # 1307-01-26
    Era("延慶", "enkyou", Jidai.KAMAKURA, -20861884800, -20783606400),  # 1308-11-30
    Era("応長", "ouchou", Jidai.KAMAKURA, -20783606400, -20753712000),  # 1311-05-25
    Era("正和", "shouwa", Jidai.KAMAKURA, -20753712000, -20599574400),  # 1312-05-05
    Era("文保", "bunpou", Jidai.KAMAKURA, -20599574400, -20531059200),  # 1317-03-24
    Era("元応", "genou", Jidai.KAMAKURA, -20531059200, -20472825600),  # 1319-05-26
    Era("元亨", "genkou", Jidai.KAMAKURA, -20472825600, -20354112000),  # 1321-03-30
    Era("正中", "shouchuu", Jidai.KAMAKURA, -20354112000, -20309270400),  # 1325-01-02
    Era("嘉暦", "karyaku", Jidai.KAMAKURA, -20309270400, -20204467200),  # 1326-06-05
    Era("元徳", "gentoku", Jidai.KAMAKURA, -20204467200, -20142345600),  # 1329-09-30
    Era("元弘", "genkou", Jidai.NANBOKUCHOU, -20142345600, -20064067200),  # 1331-09-19
    Era("建武", "kenmu", Jidai.NANBOKUCHOU, -20064067200, -19997712000),  # 1334-03-13
    Era("延元", "engen", Jidai.NANBOKUCHOU, -19997712000, -19867680000),  # 1336-04-19
    Era("興国", "koukoku", Jidai.NANBOKUCHOU, -19867680000, -19657641600),  # 1340-06-02
    Era("正平", "shouhei", Jidai.NANBOKUCHOU, -19657641600, -18913824000),  # 1347-01-28
    Era("建徳", "kentoku", Jidai.NANBOKUCHOU, -18913824000, -18859910400),  # 1370-08-24
    Era("文中", "bunchuu", Jidai.NANBOKUCHOU, -18859910400, -18760464000),  # 1372-05-09
    Era("天授", "tenju", Jidai.NANBOKUCHOU, -18760464000, -18580752000),  # 1375-07-04
    Era("弘和", "kouwa", Jidai.NANBOKUCHOU, -18580752000, -18479750400),  # 1381-03-14
    Era("元中", "genchuu", Jidai.NANBOKUCHOU, -18479750400, -18211305600),  # 1384-05-26
    Era("明徳", "meitoku", Jidai.MUROMACHI, -18211305600, -18157651200),  # 1392-11-27
    Era("応永", "ouei", Jidai.MUROMACHI, -18157651200, -17089228800),  # 1394-08-10
    Era("正長", "shouchou", Jidai.MUROMACHI, -17089228800, -17047756800),  # 1428-06-19
    Era("永享", "eikyou", Jidai.MUROMACHI, -17047756800, -16686950400),  # 1429-10-12
    Era("嘉吉", "kakitsu", Jidai.MUROMACHI, -16686950400, -16593638400),  # 1441-03-19
    Era("文安", "bunan", Jidai.MUROMACHI, -16593638400, -16420752000),  # 1444-03-03
    Era("宝徳", "houtoku", Jidai.MUROMACHI, -16420752000, -16326576000),  # 1449-08-25
    Era("享徳", "kyoutoku", Jidai.MUROMACHI, -16326576000, -16229635200),  # 1452-08-19
    Era("康正", "koushou", Jidai.MUROMACHI, -16229635200, -16163020800),  # 1455-09-15
    Era("長禄", "chouroku", Jidai.MUROMACHI, -16163020800, -16058995200),  # 1457-10-25
    Era("寛正", "kanshou", Jidai.MUROMACHI, -16058995200, -15897686400),  # 1461-02-10
    Era("文正", "bunshou", Jidai.MUROMACHI, -15897686400, -15863904000),  # 1466-03-23
    Era("応仁", "ounin", Jidai.SENGOKU, -15863904000, -15795561600),  # 1467-04-18
    Era("文明", "bunmei", Jidai.SENGOKU, -15795561600, -15222211200),  # 1469-06-17
    Era("長享", "choukyou", Jidai.SENGOKU, -15222211200, -15155769600),  # 1487-08-18
    Era("延徳", "entoku", Jidai.SENGOKU, -15155769600, -15064099200),  # 1489-09-25
    Era("明応", "meiou", Jidai.SENGOKU, -15064099200, -14792803200),  # 1492-08-21
    Era("文亀", "bunki", Jidai.SENGOKU, -14792803200, -14698281600),  # 1501-03-28
    Era("永正", "eishou", Jidai.SENGOKU, -14698281600, -14145321600),  # 1504-03-26
    Era("大永", "daiei", Jidai.SENGOKU, -14145321600, -13926124800),  # 1521-10-03
    Era("享禄", "kyouroku", Jidai.SENGOKU, -13926124800, -13800326400),  # 1528-09-13
    Era("天文", "tenbun", Jidai.SENGOKU, -13800326400, -13068518400),  # 1532-09-08
    Era("弘治", "kouji", Jidai.SENGOKU, -13068518400, -12994041600),  # 1555-11-17
    Era("永禄", "eiroku", Jidai.SENGOKU, -12994041600, -12609302400),  # 1558-03-28
    Era("元亀", "genki", Jidai.SENGOKU, -12609302400, -12506832000),  # 1570-06-06
    Era("天正", "tenshou", Jidai.AZUCHI_MOMOYAMA, -12506832000, -11896156800),  # 1573-09-04
    Era("文禄", "bunroku", Jidai.AZUCHI_MOMOYAMA, -11896156800, -11772086400),  # 1593-01-10
    Era("慶長", "keichou", Jidai.AZUCHI_MOMOYAMA, -11772086400, -11181369600),  # 1596-12-16
    Era("元和", "genna", Jidai.EDO, -11181369600, -10909468800),  # 1615-09-05
    Era("寛永", "kanei", Jidai.EDO, -10909468800, -10254902400),  # 1624-04-17
    Era("正保", "shouhou", Jidai.EDO, -10254902400, -10152950400),  # 1645-01-13
    Era("慶安", "keian", Jidai.EDO, -10152950400, -10009785600),  # 1648-04-07
    Era("承応", "jouou", Jidai.EDO, -10009785600, -9928569600),  # 1652-10-20
    Era("明暦", "meireki", Jidai.EDO, -9928569600, -9825667200),  # 1655-05-18
    Era("万治", "manji", Jidai.EDO, -9825667200, -9738748800),  # 1658-08-21
    Era("寛文", "kanbun", Jidai.EDO, -9738748800, -9346233600),  # 1661-05-23
    Era("延宝", "enpou", Jidai.EDO, -9346233600, -9092908800),  # 1673-10-30
    Era("天和", "tenna", Jidai.EDO, -9092908800, -9017049600),  # 1681-11-09
    Era("貞享", "joukyou", Jidai.EDO, -9017049600, -8873452800),  # 1684-04-05
    Era("元禄", "genroku", Jidai.EDO, -8873452800, -8385033600),  # 1688-10-23
    Era("宝永", "houei", Jidai.EDO, -8385033600, -8159356800),  # 1704-04-16
    Era("正徳", "shoutoku", Jidai.EDO, -8159356800, -7996406400),  # 1711-06-11
    Era("享保", "kyouhou", Jidai.EDO, -7996406400, -7370697600),  # 1716-08-09
    Era("元文", "genbun", Jidai.EDO, -7370697600, -7217769600),  # 1736-06-07
    Era("寛保", "kanpou", Jidai.EDO, -7217769600, -7123852800),  # 1741-04-12
    Era("延享", "enkyou", Jidai.EDO, -7123852800, -6986908800),  # 1744-04-03
    Era("寛延", "kanen", Jidai.EDO, -6986908800, -6880982400),  # 1748-08-05
    Era("宝暦", "houreki", Jidai.EDO, -6880982400, -6485097600),  # 1751-12-14
    Era("明和", "meiwa", Jidai.EDO, -6485097600, -6218553600),  # 1764-06-30
    Era("安永", "anei", Jidai.EDO, -6218553600, -5954342400),  # 1772-12-10
    Era("天明", "tenmei", Jidai.EDO, -5954342400, -5707497600),  # 1781-04-25
    Era("寛政", "kansei", Jidai.EDO, -5707497600, -5326473600),  # 1789-02-19
    Era("享和", "kyouwa", Jidai.EDO, -5326473600, -5231520000),  # 1801-03-19
    Era("文化", "bunka", Jidai.EDO, -5231520000, -4784140800),  # 1804-03-22
    Era("文政", "bunsei", Jidai.EDO, -4784140800, -4384540800),  # 1818-05-26
    Era("天保", "tenpou", Jidai.EDO, -4384540800, -3943900800),  # 1831-01-23
    Era("弘化", "kouka", Jidai.EDO, -3943900800, -3842121600),  # 1845-01-09
    Era("嘉永", "kaei", Jidai.EDO, -3842121600, -3627849600),  # 1848-04-01
    Era("安政", "ansei", Jidai.EDO, -3627849600, -3462825600),  # 1855-01-15
    Era("万延", "manen", Jidai.EDO, -3462825600, -3432153600),  # 1860-04-08
    Era("文久", "bunkyuu", Jidai.EDO, -3432153600, -3337632000),  # 1861-03-29
    Era("元治", "genji", Jidai.EDO, -3337632000, -3303072000),  # 1864-03-27
    Era("慶応", "keiou", Jidai.EDO, -3303072000, -3193257600),  # 1865-05-01
    Era("明治", "meiji", Jidai.MODERN, -3193257600, -1812153600),  # 1868-10-23
    Era("大正", "taishou", Jidai.MODERN, -1812153600, -1357603200),  # 1912-07-30
    Era("昭和", "shouwa", Jidai.MODERN, -1357603200, 600220800),  # 1926-12-25
    Era("平成", "heisei", Jidai.MODERN, 600220800, 1556668800),  # 1989-01-08
    Era("令和", "reiwa", Jidai.MODERN, 1556668800, None),  # 2019-05-01
)


__all__ = ["Era", "Jidai", "SORTED_ERAS"]
