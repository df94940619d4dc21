"""
Lambda Handlers for Memo Skill

サーバレス構成のエントリポイント:
- Skill (Alexa Skills Kit トリガー)
"""
