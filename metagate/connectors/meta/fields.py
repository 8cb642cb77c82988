"""metagate — Field projections requested from the Graph API.

One ``fields=`` string per resource. Nested ``{...}`` and ``.summary(true)``
expansions let a single round trip embed child resources.
"""

# ── Facebook Pages ──

PAGE_FIELDS = (
    "id,name,username,fan_count,followers_count,verification_status,"
    "category,category_list,phone,website,location,hours,price_range,"
    "rating_count,overall_star_rating,cover,picture"
)
PAGE_POST_FIELDS = (
    "id,message,created_time,updated_time,type,permalink_url,full_picture,"
    "picture,source,status_type,shares,comments.summary(true),"
    "reactions.summary(true)"
)
PAGE_PUBLIC_POST_FIELDS = "id,message,created_time,type,permalink_url"
PAGE_FOLLOWER_FIELDS = "id,name,picture"
PAGE_EVENT_FIELDS = (
    "id,name,description,start_time,end_time,place,cover,attending_count,"
    "interested_count,declined_count,maybe_count"
)
PAGE_PHOTO_FIELDS = (
    "id,images,name,created_time,comments.summary(true),reactions.summary(true)"
)
PAGE_VIDEO_FIELDS = (
    "id,title,description,created_time,updated_time,length,source,views,"
    "comments.summary(true),reactions.summary(true)"
)
PAGE_REVIEW_FIELDS = "id,reviewer,rating,review_text,created_time"
PAGE_CONVERSATION_FIELDS = "id,participants,updated_time,message_count,unread_count"
PAGE_LEAD_FIELDS = "id,created_time,field_data"
PAGE_TAB_FIELDS = "id,name,link,application"
PAGE_ROLE_FIELDS = "id,name,email,role"

# ── Instagram ──

IG_ACCOUNT_FIELDS = (
    "id,username,name,profile_picture_url,biography,followers_count,"
    "follows_count,media_count,website,verification_status"
)
IG_MEDIA_FIELDS = (
    "id,caption,media_type,media_url,thumbnail_url,permalink,timestamp,"
    "like_count,comments_count,owner,children{media_url,media_type}"
)
IG_STORY_FIELDS = (
    "id,media_type,media_url,permalink,timestamp,"
    "insights.metric(impressions,reach,exits,replies)"
)
IG_COMMENT_FIELDS = "id,text,timestamp,username,like_count"
IG_TAGGED_MEDIA_FIELDS = (
    "id,caption,media_type,media_url,permalink,timestamp,like_count,comments_count"
)
IG_LIVE_MEDIA_FIELDS = (
    "id,caption,media_type,media_url,permalink,timestamp,like_count,"
    "comments_count,insights.metric(impressions,reach,engagement,saved)"
)
IG_REEL_FIELDS = (
    "id,caption,media_type,media_url,thumbnail_url,permalink,timestamp,"
    "like_count,comments_count,insights.metric(impressions,reach,engagement,saved)"
)
IG_CAROUSEL_FIELDS = (
    "id,caption,media_type,media_url,permalink,timestamp,like_count,"
    "comments_count,children{media_url,media_type}"
)
IG_USER_FIELDS = "id,username,profile_picture_url"

# ── Ads ──

_INLINE_INSIGHTS = "insights{impressions,reach,clicks,spend,ctr,cpc,cpm}"

AD_ACCOUNT_FIELDS = (
    "id,name,account_status,account_id,timezone_name,currency,"
    "timezone_offset_hours_utc,business,owner,capabilities,disable_reason,"
    "amount_spent,balance,spend_cap,funding_source_details"
)
CAMPAIGN_FIELDS = (
    "id,name,objective,status,created_time,updated_time,start_time,stop_time,"
    f"special_ad_categories,spend_cap,budget_remaining,{_INLINE_INSIGHTS}"
)
ADSET_FIELDS = (
    "id,name,campaign_id,status,created_time,updated_time,start_time,end_time,"
    f"targeting,optimization_goal,bid_amount,budget_remaining,{_INLINE_INSIGHTS}"
)
AD_FIELDS = (
    "id,name,adset_id,campaign_id,status,created_time,updated_time,"
    f"creative{{id,title,body,image_url,video_id}},{_INLINE_INSIGHTS}"
)
ACCOUNT_INSIGHT_FIELDS = (
    "impressions,reach,clicks,spend,ctr,cpc,cpm,frequency,unique_clicks,"
    "unique_ctr,unique_link_clicks,unique_link_clicks_ctr,actions,"
    "action_values,cost_per_action_type,cost_per_unique_action_type"
)
OBJECT_INSIGHT_FIELDS = (
    "impressions,reach,clicks,spend,ctr,cpc,cpm,frequency,unique_clicks,"
    "unique_ctr,actions,action_values,cost_per_action_type"
)
CREATIVE_FIELDS = (
    "id,name,title,body,image_url,video_id,object_story_spec,thumbnail_url,"
    "url_tags,effective_object_story_type,created_time,updated_time"
)
AUDIENCE_FIELDS = (
    "id,name,description,subtype,approximate_count,data_source,"
    "delivery_status,created_time,updated_time"
)
PIXEL_FIELDS = "id,name,code,last_fired_time,created_time,updated_time"
PIXEL_EVENT_FIELDS = (
    "id,event_name,event_time,user_data,event_source_url,custom_data"
)
SPEND_FIELDS = "spend,impressions,reach,clicks,ctr,cpc,cpm"
ACCOUNT_USER_FIELDS = "id,name,role,permissions"
BILLING_FIELDS = (
    "id,account_id,amount_spent,balance,currency,payment_method,"
    "time_created,time_updated"
)

# ── Graph account / app ──

APP_FIELDS = "id,name,description,created_time,updated_time"
USER_FIELDS = "id,name,email,picture,verified"
USER_ACCOUNT_FIELDS = "id,name,access_token,category,fan_count,verification_status"
