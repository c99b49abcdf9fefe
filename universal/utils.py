import warnings
from bs4 import BeautifulSoup, Tag, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Fantasy Grounds formattedtext block elements
BLOCK_TAGS = ['p', 'h', 'li', 'list', 'frame', 'table', 'tr', 'td', 'br', 'hr', 'ul', 'ol']

def filter_entities(text):
	text = text.replace("\u00c2\u00ba", "º") # u00ba
	text = text.replace("\u00c3\u0097", "×")
	text = text.replace("\u00e2\u0080\u0091", "‑")
	text = text.replace("\u00e2\u0080\u0093", "–")
	text = text.replace("\u00e2\u0080\u0094", "—")
	text = text.replace("\u00e2\u0080\u0099", "’") # u2019
	text = text.replace("\u00e2\u0080\u009c", "“")
	text = text.replace("\u00e2\u0080\u009d", "”")
	text = text.replace("\u00e2\u0080\u00a6", "…") # u2026
	text = text.replace("%5C", "\\")
	text = text.replace("&amp;", "&")
	text = text.replace("\u00ca\u00bc", "’") # u2019 (was u02BC)
	text = text.replace("\u00c2\u00a0", " ")
	text = text.replace("\u00a0", " ")
	text = ' '.join([part.strip() for part in text.split("\n")])
	return text

def get_text(detail):
	return ''.join(detail.find_all(string=True))

def element_children(node):
	if node is None:
		return []
	return [c for c in node.children if type(c) == Tag]

def summarize(html):
	if not html:
		return ""
	bs = BeautifulSoup(html, 'html.parser')
	for tag in bs.find_all(BLOCK_TAGS):
		tag.insert_after(" ")
	text = filter_entities(get_text(bs))
	return ' '.join(text.split())
