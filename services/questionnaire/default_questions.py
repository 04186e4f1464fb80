# services/questionnaire/default_questions.py
"""Default screening catalog: 75 statements, 15 per category, in German."""
from typing import Dict, List, Union

QUESTION_CATEGORIES = ("social", "masking", "sensory", "attention", "emotional")

_CATALOG = {
    # Soziale Kommunikation
    "social": (
        'Ich finde es schwierig, Smalltalk zu führen.',
        'Ich verstehe oft nicht, wann ein Gespräch beendet werden sollte.',
        'Ich habe Schwierigkeiten, Sarkasmus oder Ironie zu verstehen.',
        'Ich fühle mich in sozialen Situationen oft überfordert.',
        'Ich vermeide Augenkontakt in Gesprächen.',
        'Ich habe Probleme, die Emotionen anderer Menschen zu erkennen.',
        'Ich finde es schwer, Freundschaften zu schließen und aufrechtzuerhalten.',
        'Ich bevorzuge schriftliche Kommunikation gegenüber persönlichen Gesprächen.',
        'Ich fühle mich unwohl bei spontanen sozialen Einladungen.',
        'Ich verstehe gesellschaftliche Regeln und Normen nicht intuitiv.',
        'Ich habe Schwierigkeiten, angemessene Gesprächsthemen zu finden.',
        'Ich fühle mich nach sozialen Interaktionen oft erschöpft.',
        'Ich nehme Dinge oft wörtlich, die als Scherz gemeint waren.',
        'Ich habe Probleme, nonverbale Signale zu interpretieren.',
        'Ich finde Gruppenkonversationen verwirrend und schwer zu verfolgen.',
    ),
    # Masking & Kompensation
    "masking": (
        'Ich kopiere das Verhalten anderer, um mich anzupassen.',
        'Ich verstelle mich in sozialen Situationen.',
        'Ich habe gelernt, "normale" Reaktionen nachzuahmen.',
        'Ich bereite Gesprächsthemen vor, bevor ich mit anderen spreche.',
        'Ich fühle mich wie ein Schauspieler in sozialen Situationen.',
        'Ich unterdrücke meine natürlichen Reaktionen in der Öffentlichkeit.',
        'Ich studiere andere Menschen, um zu lernen, wie ich mich verhalten soll.',
        'Ich zwinge mich zu Augenkontakt, auch wenn es unangenehm ist.',
        'Ich habe verschiedene "Persönlichkeiten" für verschiedene Situationen.',
        'Ich fühle mich erschöpft vom Versuch, "normal" zu wirken.',
        'Ich verberge meine besonderen Interessen vor anderen.',
        'Ich imitiere Körpersprache und Mimik anderer.',
        'Ich unterdrücke meine natürlichen Bewegungen (Stimming).',
        'Ich fühle mich unsicher über meine wahre Identität.',
        'Ich passe meine Sprechweise an die der anderen an.',
    ),
    # Routinen / Sensorik
    "sensory": (
        'Ich brauche feste Routinen und Struktur in meinem Alltag.',
        'Unerwartete Änderungen bereiten mir großen Stress.',
        'Bestimmte Geräusche sind für mich überwältigend oder schmerzhaft.',
        'Ich bin empfindlich gegenüber bestimmten Texturen oder Materialien.',
        'Helles Licht oder flackerndes Licht stört mich sehr.',
        'Ich habe starke Vorlieben oder Abneigungen bei Essen.',
        'Ich führe repetitive Bewegungen oder Handlungen aus (Stimming).',
        'Ich sammle oder ordne Dinge in bestimmten Mustern.',
        'Ich habe intensive, spezialisierte Interessen.',
        'Ich merke mir viele Details über meine Spezialinteressen.',
        'Ich brauche Zeit allein, um mich zu erholen.',
        'Ich reagiere stark auf bestimmte Gerüche.',
        'Ich mag es nicht, unerwartet berührt zu werden.',
        'Ich bevorzuge vertraute Umgebungen gegenüber neuen Orten.',
        'Ich bemerke Details, die andere übersehen.',
    ),
    # Aufmerksamkeitsregulation
    "attention": (
        'Ich habe Schwierigkeiten, mich zu konzentrieren, wenn es Ablenkungen gibt.',
        'Ich vergesse oft wichtige Termine oder Aufgaben.',
        'Ich prokrastiniere häufig bei uninteressanten Aufgaben.',
        'Ich verliere oft Gegenstände oder vergesse, wo ich sie hingelegt habe.',
        'Ich habe Phasen von Hyperfokus, wo ich alles um mich herum vergesse.',
        'Ich unterbreche andere oft im Gespräch.',
        'Ich habe Schwierigkeiten, ruhig sitzen zu bleiben.',
        'Ich fange viele Projekte an, aber beende sie nicht.',
        'Ich bin leicht ablenkbar durch Geräusche oder Bewegungen.',
        'Ich handle oft impulsiv, ohne über die Konsequenzen nachzudenken.',
        'Ich habe ein schlechtes Zeitgefühl.',
        'Ich vergesse oft, was ich gerade sagen wollte.',
        'Ich brauche externe Struktur, um organisiert zu bleiben.',
        'Ich wechsle häufig zwischen verschiedenen Aufgaben hin und her.',
        'Ich habe Schwierigkeiten, langweilige aber wichtige Aufgaben zu erledigen.',
    ),
    # Selbstwahrnehmung / Emotionale Steuerung
    "emotional": (
        'Ich habe Schwierigkeiten, meine eigenen Emotionen zu benennen.',
        'Meine Emotionen können sehr intensiv und überwältigend sein.',
        'Ich reagiere emotional stärker als andere auf alltägliche Situationen.',
        'Ich brauche länger als andere, um emotionale Erlebnisse zu verarbeiten.',
        'Ich fühle mich oft anders als andere Menschen.',
        'Ich habe Schwierigkeiten, Stress zu bewältigen.',
        'Ich erlebe häufig emotionale Zusammenbrüche oder Meltdowns.',
        'Ich fühle mich oft missverstanden von anderen.',
        'Ich habe Schwierigkeiten, meine Gefühle anderen mitzuteilen.',
        'Ich neige zu perfektionistischem Verhalten.',
        'Ich empfinde Kritik als sehr schmerzhaft.',
        'Ich zweifle oft an meinen sozialen Fähigkeiten.',
        'Ich fühle mich häufig überfordert von alltäglichen Anforderungen.',
        'Ich habe Phasen, in denen ich mich völlig zurückziehe.',
        'Ich suche nach Erklärungen für meine Erfahrungen und Schwierigkeiten.',
    ),
}


def default_questions() -> List[Dict[str, Union[int, str]]]:
    questions = []
    for category in QUESTION_CATEGORIES:
        for text in _CATALOG[category]:
            position = len(questions) + 1
            questions.append({"id": position, "category": category, "text": text, "order": position})
    return questions
