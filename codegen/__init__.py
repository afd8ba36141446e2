"""
Figma node-to-code generators.

Backends:
- react_generator: React + Tailwind CSS (web)
- react_native_generator: React Native style objects (mobile)
- wechat_generator: WeChat mini-program component bundle
"""
