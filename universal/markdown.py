from markdownify import MarkdownConverter

# Character struct keys that carry formatted text
FORMATTED_FIELDS = ['benefit', 'normal', 'special', 'text', 'description']


class FGConverter(MarkdownConverter):
	convert_u = MarkdownConverter.convert_i

	def convert_h(self, el, text, parent_tags):
		return self.convert_hN(3, el, text, parent_tags)

	def convert_frame(self, el, text, parent_tags):
		return self.convert_blockquote(el, text, parent_tags)

	def convert_li(self, el, text, parent_tags):
		result = "\n" + super().convert_li(el, text, parent_tags).replace("\n", "")
		return result

# Create shorthand method for conversion
def md(html, **options):
	return FGConverter(**options).convert(html)


def markdown_pass(struct):
	for k, v in struct.items():
		if isinstance(v, dict):
			markdown_pass(v)
		elif isinstance(v, list):
			for item in v:
				if isinstance(item, dict):
					markdown_pass(item)
		elif isinstance(v, str) and k in FORMATTED_FIELDS:
			if v.find("<") > -1:
				struct[k] = md(v).strip()
